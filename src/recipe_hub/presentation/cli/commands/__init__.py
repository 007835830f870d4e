# src/recipe_hub/presentation/cli/commands/__init__.py
