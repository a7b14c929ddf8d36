from fynctions import Functions, NullReferenceError

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Identity and constants")
print("-" * 100)
print()

# The identity function hands back exactly what it was given.
same = Functions.identity()
print(same("Alice"))

# A constant function ignores its argument entirely.
always_zero = Functions.constant(0)
print(always_zero("anything"), always_zero(None))

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Looking values up in a mapping")
print("-" * 100)
print()

ages = {"alice": 30, "bob": 25}

# Without a default, unknown keys give None.
age_of = Functions.for_map(ages)
print(age_of("alice"), age_of("carol"))

# With a default, unknown keys give the default.
age_or_unknown = Functions.for_map(ages, -1)
print(age_or_unknown("carol"))

# The mapping is not copied, so later changes show through.
ages["carol"] = 41
print(age_of("carol"))

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Composing functions")
print("-" * 100)
print()

# compose(g, f) runs f first, then g.
next_birthday = Functions.compose(lambda age: age + 1, age_of)
print(next_birthday("bob"))

# The >> operator reads left to right.
describe = age_of >> (lambda age: age * 12) >> Functions.to_string_function()
print(describe("alice") + " months")

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Predicates and failures")
print("-" * 100)
print()

is_adult = Functions.for_predicate(lambda age: age >= 18)
print(is_adult(30), is_adult(12))

try:
    Functions.to_string_function()(None)
except NullReferenceError as error:
    print(f"Refused: {error}")
