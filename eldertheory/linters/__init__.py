"""Validators for hierarchies, complex functions and mathematical structures."""