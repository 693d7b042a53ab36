"""Classic data-structure and algorithm exercises: recursion, sorting, sets, trees and graphs."""

__version__ = "0.1.0"