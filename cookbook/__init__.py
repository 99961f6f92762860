"""
Yummy Notes recipe catalog.

This package contains:
- models: Recipe, Ingredient, RecipeStep and the RecipeCollection envelope
- loader: load, filter and encode the bundled recipes document
- store: the published catalog and its load state
- navigation: forward-only step cursor
- assets: recipe image lookup
- config: environment and logging configuration
"""
