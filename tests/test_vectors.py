from rustdrill.lessons.vectors import array_and_vec, vec_loop, vec_map

EVENS = [2, 4, 6, 8, 10]
DOUBLED = [4, 8, 12, 16, 20]


def test_array_and_vec_similarity():
    array, vector = array_and_vec()
    assert list(array) == vector
    assert vector == [10, 20, 30, 40]


def test_vec_loop():
    assert vec_loop(list(EVENS)) == DOUBLED


def test_vec_loop_mutates_in_place():
    values = list(EVENS)
    result = vec_loop(values)
    assert result is values
    assert values == DOUBLED


def test_vec_map():
    values = list(EVENS)
    assert vec_map(values) == DOUBLED
    assert values == EVENS