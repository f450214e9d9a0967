"""
my-chef: meal recommendations from the HowToCook recipe catalog.

Builds weekly meal plans with grocery lists, or a quick dish combination
for a given number of people.
"""

__version__ = "0.1.0"
