"""
Catalog categories, day labels and keyword tables.

Category names and keywords match the HowToCook dataset, which is written
in Chinese.
"""

# Recipe categories
AQUATIC = "水产"
BREAKFAST = "早餐"
MEAT = "荤菜"
STAPLE = "主食"
VEGETABLE = "素菜"
DESSERT = "甜品"
SOUP = "汤羹"

WEEKDAY_LABELS = ["周一", "周二", "周三", "周四", "周五"]
WEEKEND_LABELS = ["周六", "周日"]

# Candidate categories per slot
WEEKDAY_LUNCH_CATEGORIES = [STAPLE, AQUATIC, MEAT, VEGETABLE, DESSERT]
WEEKDAY_DINNER_CATEGORIES = [STAPLE, AQUATIC, MEAT, VEGETABLE, DESSERT, SOUP]
WEEKEND_MAIN_CATEGORIES = [MEAT, AQUATIC]

# Quick recommendation pools
MEAT_DISH_CATEGORIES = {MEAT, AQUATIC}
NON_VEGETABLE_CATEGORIES = {MEAT, AQUATIC, BREAKFAST, STAPLE}

# Checked in order, one dish per meat type
MEAT_TYPES = ["猪肉", "鸡肉", "牛肉", "羊肉", "鸭肉", "鱼肉"]

# Shopping buckets, checked spices -> fresh -> pantry
SPICE_KEYWORDS = [
    "盐", "糖", "酱油", "生抽", "老抽", "醋", "料酒", "蚝油", "胡椒",
    "花椒", "八角", "桂皮", "香叶", "孜然", "五香粉", "十三香", "味精",
    "鸡精", "辣椒粉", "辣椒面", "干辣椒", "豆瓣酱", "咖喱",
]

FRESH_KEYWORDS = [
    "肉", "鱼", "虾", "蟹", "贝", "鸡", "鸭", "鹅", "牛", "羊", "猪", "排骨",
    "蛋", "奶", "豆腐", "葱", "姜", "蒜", "香菜", "白菜", "青菜", "生菜",
    "菠菜", "韭菜", "芹菜", "番茄", "西红柿", "土豆", "萝卜", "黄瓜", "茄子",
    "青椒", "辣椒", "洋葱", "南瓜", "冬瓜", "丝瓜", "苦瓜", "西兰花", "花菜",
    "菇", "笋", "豆芽", "玉米", "莲藕", "山药", "柠檬", "苹果", "香蕉",
]

PANTRY_KEYWORDS = [
    "米", "面", "粉", "油", "豆", "干", "罐头", "酱", "木耳", "腐竹",
    "粉丝", "紫菜", "海带", "芝麻", "花生", "蜂蜜", "酵母",
]
