from algokit.valuebox import ValueBox


def test_defaults():
    box = ValueBox()
    assert (box.value, box.size) == (0, 0)


def test_set_updates_both_fields():
    box = ValueBox()
    box.set(4, 5)
    assert (box.value, box.size) == (4, 5)


def test_copy_is_independent():
    original = ValueBox()
    original.set(4, 5)
    duplicate = original.copy()
    original.set(10, 11)
    assert (duplicate.value, duplicate.size) == (4, 5)
    assert (original.value, original.size) == (10, 11)


def test_copy_equals_original_until_changed():
    original = ValueBox(45, 44)
    duplicate = original.copy()
    assert duplicate == original
    duplicate.set(1, 1)
    assert original == ValueBox(45, 44)