#!/usr/bin/env python3
"""
Command-line interface for recipe-import.
This tool extracts a recipe from a URL or a saved HTML page, prints it and
optionally saves it as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import RecipeImportError
from .fetcher import RecipeFetcher
from .models import Recipe
from .parser import parse_recipe_from_html
from .utils import format_duration, generate_slug


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    logging.getLogger().setLevel(log_level)

    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


def format_summary(recipe: Recipe) -> str:
    """Human readable overview of an imported recipe."""
    lines = [recipe.title]
    if recipe.sourceUrl:
        lines.append(f"Source: {recipe.sourceUrl}")

    times = []
    for label, minutes in (("prep", recipe.prepTime), ("cook", recipe.cookTime), ("total", recipe.totalTime)):
        if minutes:
            times.append(f"{label} {format_duration(minutes)}")
    if times:
        lines.append("Time: " + ", ".join(times))
    if recipe.servings:
        lines.append(f"Servings: {recipe.servings}")
    if recipe.cuisine:
        lines.append(f"Cuisine: {recipe.cuisine}")

    lines.append(f"Ingredients ({len(recipe.ingredients)}):")
    for ingredient in recipe.ingredients:
        parts = [
            f"{ingredient.quantity:g}" if ingredient.quantity is not None else None,
            ingredient.unit,
            ingredient.name,
            f"({ingredient.notes})" if ingredient.notes else None,
        ]
        lines.append("  - " + " ".join(p for p in parts if p))

    lines.append(f"Instructions ({len(recipe.instructions)}):")
    for step, text in recipe.numbered_instructions():
        lines.append(f"  {step}. {text}")
    return "\n".join(lines)


async def main_async(args: argparse.Namespace) -> int:
    """Asynchronous main function to handle recipe import."""
    try:
        if args.mode == "url":
            if not args.url:
                logging.error("URL must be provided in URL mode")
                return 1
            logging.info(f"Processing URL: {args.url}")
            async with RecipeFetcher() as fetcher:
                recipe = await fetcher.fetch_recipe(args.url)
        else:
            if not args.input_file:
                logging.error("Input file must be provided in html mode")
                return 1
            logging.info(f"Processing HTML file: {args.input_file}")
            try:
                html = Path(args.input_file).read_text(encoding="utf-8")
            except OSError as e:
                logging.error(f"Error reading input file: {str(e)}")
                return 1
            recipe = parse_recipe_from_html(html, args.source_url)
    except RecipeImportError as e:
        logging.error(f"Import failed: {str(e)}")
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    recipe_data = recipe.to_dict()
    if args.json:
        print(json.dumps(recipe_data, indent=2, ensure_ascii=False))
    else:
        print(format_summary(recipe))

    if args.recipe_output_folder:
        output_folder = Path(args.recipe_output_folder)
        output_folder.mkdir(parents=True, exist_ok=True)
        json_path = output_folder / f"{generate_slug(recipe.title)}.recipe.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(recipe_data, f, indent=2, ensure_ascii=False)
        logging.info(f"Recipe successfully saved to: {json_path}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    parser = argparse.ArgumentParser(
        description="Extract structured recipes from web pages"
    )

    parser.add_argument(
        "--mode",
        choices=["url", "html"],
        required=True,
        help="Import mode: 'url' to fetch a page, 'html' to parse a saved HTML file"
    )

    parser.add_argument(
        "--url",
        help="URL to import (required in 'url' mode)"
    )

    parser.add_argument(
        "--input-file",
        help="HTML file to parse (required in 'html' mode)"
    )

    parser.add_argument(
        "--source-url",
        help="Original URL of the saved page (only for 'html' mode)"
    )

    parser.add_argument(
        "--recipe-output-folder",
        help="Folder to save the recipe JSON file as <slug>.recipe.json"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the recipe as JSON instead of a summary"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging with detailed information"
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    return asyncio.run(main_async(args))


if __name__ == "__main__":
    sys.exit(main())
