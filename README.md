# datacraft

Generate values of test data from a small JSON specification.

A specification is a JSON object that maps each field name to an object with
a `type` and any options for that type:

```json
{
  "id":  {"type": "uuid"},
  "row": {"type": "rownum"},
  "num": {"type": "integer", "min": 1, "max": 100, "seed": 42}
}
```

## Field types

| type                   | produces                                           |
|------------------------|----------------------------------------------------|
| `uuid`                 | a random UUID string                               |
| `rownum` / `iteration` | the number of the current iteration, starting at 0 |
| `integer`              | a random integer in `[min, max]`, both inclusive   |

For `integer`, `min` defaults to -1,000,000,000 and `max` to 1,000,000,000.
Both must be numbers (a float is truncated to an integer), and `min` has to
be less than `max`. The optional `seed` has to be a non-negative number;
with it, the sequence of values is the same from one run to the next.
Without it, the values are unseeded random.

## Command line

```
datacraft --spec spec.json --iterations 5
datacraft -s spec.json -i 5
```

`--spec` / `-s` is required. `--iterations` / `-i` defaults to 1 and must be
greater than 0. For each iteration and each field, the command prints the
field's spec and the value it generated. If a field cannot be built, for
example because its type is unknown or its options are invalid, the command
prints the error and goes on with the next field. The exit status is 1 when
the arguments are wrong or the spec file cannot be read or parsed, and 0
otherwise.

## Library use

```python
from datacraft.registry import Registry
from datacraft.factories import register
from datacraft.loader import SpecLoader

registry = Registry()
register(registry)

spec = {"row": {"type": "rownum"}, "num": {"type": "integer", "min": 0, "max": 9}}
loader = SpecLoader(registry, spec)

supplier = loader.get("num")
values = [supplier.next(i) for i in range(5)]
```

`SpecLoader.get` builds each supplier once and returns the same one on later
calls. If the field is missing or has no string `type`, it raises
`datacraft.interfaces.SpecError`; if the type is not registered, it raises
`datacraft.interfaces.SupplierNotFoundError`. Both derive from
`datacraft.interfaces.DatacraftError`, as do the `SpecError`s raised by the
`integer` factory for bad options.

`datacraft.cli.load_spec(path)` reads a spec file and raises `SpecError` if it
cannot be read, is not valid JSON, or is not an object of field objects.
`datacraft.cli.process_spec(spec, iterations)` prints as the command does and
also returns the generated values as a list with one dict per iteration,
leaving out fields that failed.

You can add your own field types. Write a class with a `create(spec, loader)`
method that returns an object with a `next(iteration)` method, then register
it with `Registry.register_supplier(name, factory)`. Registering a name again
replaces the earlier factory.

## What it does not do

Specs are read from JSON only. Generated values are printed as diagnostic
lines, one per field; there is no output of whole records to a file or in a
format such as CSV or JSON lines. Only the four field types above are built
in.