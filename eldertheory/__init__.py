"""Hierarchical Elder, Mentor and Erudite entities and the models around them."""

__version__ = "0.1.0"