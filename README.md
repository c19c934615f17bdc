# repokit

Storage-agnostic building blocks for the data layer of an application.

- **Entities** (`repokit.entities`): `BaseEntity` has `id`, `created_at`,
  `updated_at`, `deleted_at` and `version` fields. `is_deleted()` reports
  whether `deleted_at` is set. `AuditableEntity` adds `created_by`,
  `updated_by` and `audit_note`. `BaseModel` is a runtime-checkable protocol
  that describes the fields every entity has.
- **Operators** (`repokit.operators`): `FilterOperator` (`eq`, `neq`, `gt`,
  `gte`, `lt`, `lte`, `like`, `in`, `not_in`, `is_null`, `is_not_null`,
  `between`, `contains`, `has`) and `LogicalOperator` (`and`, `or`).
- **Filter criteria** (`repokit.criteria`): `FilterCriteria` holds one
  condition. `to_dict()` and `from_dict()` convert it to and from a
  JSON-ready mapping. `to_dict()` leaves out `value` when it is `None`, and
  leaves out `values`, `logicalOp` and `group` when they are empty.
- **Identifiers** (`repokit.identifier`): `Identifier` builds filter
  conditions fluently and immutably. Each call returns a new identifier.
- **Sorting** (`repokit.sorting`): `SortOrder` (`asc`, `desc`) and
  `SortField`, with `to_dict`/`from_dict` and `to_json`/`from_json`.
- **Query parameters** (`repokit.query_params`): `QueryParams` holds
  pagination, search, sorting, filters, preloads and soft-delete visibility.
- **Repositories** (`repokit.repository`): `Repository` is the protocol for
  repository operations. `BaseRepository` passes every operation on to a unit
  of work that you supply.
- **Errors** (`repokit.errors`): `EntityNotFoundError`, `ValidationError`,
  `DuplicateEntityError` and `ConcurrencyError`.

## Installation

From a checkout of the project:

```
pip install .
```

## Filtering

```python
from repokit.identifier import Identifier

active = Identifier().equal("status", "active")
recent = active.greater_than("created_at", "2023-01-01")
wanted = recent.in_("category", ["A", "B", "C"]).is_not_null("email")

for criteria in wanted.to_filter_criteria():
    print(criteria.field, criteria.operator.value, criteria.value, criteria.values)

either = Identifier().equal("type", "A").or_(Identifier().equal("type", "B"))
```

After `recent` and `wanted` are built from it, `active` still holds a single
condition. `in_`, `not_in` and `between` store their operands in `values`.
The other operators store their operand in `value`.

`and_` and `or_` append the other identifier's conditions to this one's.
They set `logical_op` on the last condition of the receiver, but only when
both sides have conditions. Passing `None` returns the receiver unchanged.
`reset()` returns an empty identifier. `len()` gives the number of
conditions, and iterating an identifier yields copies of them.

## Sort fields

```python
from repokit.sorting import SortField, SortOrder

SortField("created_at", SortOrder.ASC).to_json()  # '{"field":"created_at","order":"asc"}'
SortField.from_json('{"field":"updated_at","order":"desc"}')
```

An order that is neither empty nor `asc`/`desc` raises `ValueError`.

## Query parameters

```python
from repokit.query_params import QueryParams
from repokit.sorting import SortOrder

params = (
    QueryParams(page=3, page_size=25)
    .with_search("john")
    .add_sort("name", SortOrder.ASC)
    .add_sort_desc("created_at")
    .add_preload("User")
    .with_filters(wanted)
    .prepare_defaults()
)
print(params.offset, params.limit)   # 50 25
```

`prepare_defaults` does the following, in order:

1. Raises a page below 1 to 1.
2. Replaces a page size of zero or less with 50.
3. Caps the page size at 200.
4. Sets `offset` and `limit` from the page and page size.
5. Replaces any `None` lists with empty ones.

The chaining methods change the instance in place and return it. These
include `with_deleted_visibility`, `include_deleted_records`,
`only_deleted_records`, `exclude_deleted_records` and `clear_sort`.
`clone()` returns an independent copy.

## Repositories

```python
from repokit.repository import BaseRepository

repo = BaseRepository(unit_of_work)
users = repo.find_all()
page, total = repo.find_all_with_pagination(params)
repo.soft_delete(Identifier().equal("id", 7))
```

Every method of `BaseRepository` calls the method of the same name on the
unit of work and returns its result. Exceptions pass through unchanged.

## Errors

```python
from repokit.errors import EntityNotFoundError

raise EntityNotFoundError("User", 123)   # "User with ID 123 not found"
```

## What this package does not do

repokit stores nothing itself. It has no database engine, no unit-of-work
implementation and no translation of `FilterCriteria` or `QueryParams` into
SQL or any other query language. A `BaseRepository` needs a unit of work
from you, one that offers the operations of `Repository` against your
storage of choice.

## Running the tests

```
pip install -e ".[test]"
pytest
```