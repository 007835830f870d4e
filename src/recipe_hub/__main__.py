# src/recipe_hub/__main__.py
from recipe_hub.presentation.cli.main import app

if __name__ == "__main__":
    app()
