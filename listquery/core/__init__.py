"""Core package: list query building and response shaping.

Files:
  types.py        SortDirection, FilterKind, reserved request key names
  sorting.py      sort-string parsing into a SortOrder
  filters.py      filter extraction (full and filters-only variants)
  pagination.py   page / pageSize resolution
  query.py        QuerySpecBuilder, QuerySpec, FindOptions
  response.py     paginated response envelope and models
  params.py       FastAPI dependencies (request -> QuerySpec / FilterSpec)
  config.py       Settings (env / .env)
  exceptions.py   AppException hierarchy + FastAPI handlers
  log.py          logging setup

Rule: nothing here executes queries or knows about a storage engine.
"""
