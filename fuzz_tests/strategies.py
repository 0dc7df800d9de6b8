import hypothesis.strategies as st

from uniqset import UniqueSet

words = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]*", fullmatch=True)
integers = st.integers(min_value=-1000, max_value=1000)
floats = st.floats(allow_nan=False, allow_infinity=False)
elements = integers | floats | words

element_lists = st.lists(elements, max_size=20)
unique_sets = st.builds(UniqueSet, element_lists)

# Small integer domain so that independently drawn sets overlap
small_sets = st.builds(UniqueSet, st.lists(st.integers(min_value=0, max_value=10), max_size=10))
