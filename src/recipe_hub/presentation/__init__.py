# src/recipe_hub/presentation/__init__.py
"""表现层：HTTP API 与命令行工具。"""
