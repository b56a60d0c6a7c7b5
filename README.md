# emeals_getter

Turn a list of eMeals recipe links into a LaTeX recipe book and a
combined grocery list.

## Installation

```
pip install .
```

## Usage

Put one recipe URL on each line of a text file, then run:

```
emeals-getter urls.txt
```

Every URL is fetched in its own thread. The output goes into a directory
named after today's date (`YYYYMMDD`) in the current directory:

- `groceries.txt`: every ingredient from every recipe, main dish and side
  dish, one per line.
- `recipes.tex`: a LaTeX document with one recipe per page. Each page has
  the recipe photo (if the recipe has one), its title, its side dish title
  (if any), the times, the ingredients and the numbered instructions, for
  the main dish and, where there is one, the side dish.
- the recipe images, downloaded next to `recipes.tex` so that the document
  can include them.

A recipe without an image is reported with a warning on standard error.
A URL that cannot be fetched or processed is reported on standard error
as `Error processing URL: <url>`; its recipe is left out and the other
recipes are still written. If the input file cannot be opened or read, or
the output files cannot be written, the command prints the error and exits
with status 1.

## Building the PDF

The command writes `recipes.tex` but does not typeset it. The document uses
`fontspec` and the Andika font, so build it yourself with XeLaTeX or
LuaLaTeX from inside the dated directory.

## Using it from Python

```python
from emeals_getter.cli import get_urls, read_file

get_urls(read_file("urls.txt"))
```

- `emeals_getter.cli.read_file(filename)` returns the lines of a file.
- `emeals_getter.cli.process_url(url, ingredients, recipes, lock)` fetches
  one page and appends its ingredients and LaTeX fragment to the given
  lists under the given lock.
- `emeals_getter.cli.write_ingredients(ingredients)` writes `groceries.txt`.
- `emeals_getter.cli.main(argv=None)` runs the command and returns its exit
  status.
- `emeals_getter.latex_recipes.get_recipe(recipe)` turns a parsed
  (BeautifulSoup) recipe page into a LaTeX fragment, downloading its image;
  it raises `ValueError` if the page has no title.
- `emeals_getter.latex_recipes.write_recipes(recipes)` wraps a list of such
  fragments into `recipes.tex`.

## Running the tests

```
pip install .[test]
pytest
```