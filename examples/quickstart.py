# %% [markdown]
# # fastfuzzy: Quickstart
#
# Fuzzy substring search for messy text: typos, stray punctuation, odd
# spacing and combining accents.
#
# | Part | Topic |
# |------|-------|
# | 1 | Scoring a pair with `fuzzy` |
# | 2 | One-off search with `search` |
# | 3 | Reusing an index with `Searcher` |
# | 4 | Searching objects with `key_selector` |
# | 5 | Polars integration |

# %%
import time

import polars as pl

import fastfuzzy as ff

# %% [markdown]
# ---
# ## Part 1: Scoring a pair
#
# Scores are in [0, 1]. By default the query is matched against the
# best-matching *substring* of the candidate, so a query found inside a
# longer string scores 1.0.

# %%
print(ff.fuzzy("hello", "hello there"))  # 1.0
print(ff.fuzzy("hello", "hello there", use_sellers=False))  # whole-string: 5/11
print(ff.fuzzy("abcd", "acbd"))  # transposition counts once: 0.75
print(ff.fuzzy("abcd", "acbd", use_damerau=False))  # 0.5

# %% [markdown]
# Match data maps the matched span back onto the raw string, even when
# punctuation and whitespace were dropped during normalization.

# %%
record = ff.fuzzy("hello", "  h..e..l..l  ..o", return_match_data=True)
index, length = record.match
print(record.key, record.score, repr(record.original[index:index + length]))

# %% [markdown]
# ---
# ## Part 2: One-off search

# %%
words = ["items", "iterator", "itemize", "item", "temperature"]
print(ff.search("item", words))
print(ff.search("item", words, sort_by="insertOrder"))
print(ff.search("item", words, threshold=0.9))

# %% [markdown]
# ---
# ## Part 3: Reusing an index
#
# `search()` normalizes and indexes its candidates on every call. A
# `Searcher` does that work once.

# %%
movies = [
    "The Shawshank Redemption",
    "The Godfather",
    "The Dark Knight",
    "Pulp Fiction",
    "Schindler's List",
    "Forrest Gump",
]
searcher = ff.Searcher(movies)
print(searcher.search("pulp ficton"))
print(searcher.search("godfather"))

searcher.add("Fight Club")
print(searcher.search("fite club"))
print(searcher)

# %%
corpus = [f"product {i:05d} widget" for i in range(20_000)]
searcher = ff.Searcher(corpus)

start = time.perf_counter()
for query in ["product 01234", "product 19999 widgit", "prodcut 00042"]:
    searcher.search(query, threshold=0.9)
print(f"3 searches over {len(searcher)} items: {time.perf_counter() - start:.3f}s")

# %% [markdown]
# ---
# ## Part 4: Searching objects
#
# A key selector may return several keys per item. An item is returned
# once, for its best key.

# %%
fruits = [
    {"name": "apple", "aliases": ["pomme", "apfel"]},
    {"name": "pear", "aliases": ["birne"]},
]
for record in ff.search(
    "pome",
    fruits,
    key_selector=lambda fruit: [fruit["name"], *fruit["aliases"]],
    return_match_data=True,
):
    print(record.item["name"], record.original, round(record.score, 3))

# %% [markdown]
# ---
# ## Part 5: Polars integration
#
# Importing fastfuzzy registers a `.fuzzy` expression namespace.

# %%
df = pl.DataFrame({"name": ["John", "Jon", "Jane", None]})
print(
    df.with_columns(
        score=pl.col("name").fuzzy.score("john"),
        is_match=pl.col("name").fuzzy.is_match("john", threshold=0.75),
    )
)

# %%
raw = pl.DataFrame({"raw_category": ["electronic", "clothes", "fod"]})
print(raw.with_columns(category=pl.col("raw_category").fuzzy.best_match(
    ["Electronics", "Clothing", "Food"]
)))

# %%
queries = pl.Series(["apple", "banana"])
targets = pl.Series(["appel", "banan", "cherry"])
print(ff.match_series(queries, targets, threshold=0.7))
