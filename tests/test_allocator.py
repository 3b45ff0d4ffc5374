from photostream.domain.allocator import allocate
from photostream.domain.models import FileEntry, ProtectedRange, RenamePair


def _entries(*names: str) -> list[FileEntry]:
    return [FileEntry.from_name(name) for name in names]


def _nothing_exists(name: str) -> bool:
    return False


def test_allocate_skips_reserved_numbers() -> None:
    reserved = {5, 20}

    pairs = allocate(_entries("beach.jpg", "vacation.png"), 20, reserved, _nothing_exists)

    assert pairs == [
        RenamePair("beach.jpg", "21.jpg"),
        RenamePair("vacation.png", "22.png"),
    ]
    assert reserved == {5, 20, 21, 22}


def test_allocate_never_assigns_a_reserved_number() -> None:
    reserved = {20, 21, 23, 26}
    before = set(reserved)

    pairs = allocate(_entries("a.jpg", "b.jpg", "c.jpg", "d.jpg"), 20, reserved, _nothing_exists)

    assigned = [int(pair.final_name.split(".")[0]) for pair in pairs]
    assert assigned == [22, 24, 25, 27]
    assert not before.intersection(assigned)
    assert assigned == sorted(set(assigned))


def test_allocate_retries_same_candidate_when_target_exists() -> None:
    reserved: set[int] = set()
    existing = {"20.jpg"}

    pairs = allocate(_entries("a.jpg", "b.png"), 20, reserved, existing.__contains__)

    assert pairs == [RenamePair("a.jpg", "21.jpg"), RenamePair("b.png", "22.png")]
    assert 20 in reserved


def test_allocate_without_candidates_is_a_no_op() -> None:
    reserved = {1, 2}

    assert allocate([], 20, reserved, _nothing_exists) == []
    assert reserved == {1, 2}


def test_allocate_pads_and_lowercases_extension() -> None:
    pairs = allocate(_entries("IMG_A.JPG"), 20, set(), _nothing_exists, zero_pad_width=3)

    assert pairs == [RenamePair("IMG_A.JPG", "020.jpg")]


def test_allocate_jumps_over_protected_range() -> None:
    reserved = {21}

    pairs = allocate(
        _entries("a.jpg", "b.jpg", "c.jpg"),
        0,
        reserved,
        _nothing_exists,
        protected_range=ProtectedRange(1, 19),
    )

    assert pairs == [
        RenamePair("a.jpg", "0.jpg"),
        RenamePair("b.jpg", "20.jpg"),
        RenamePair("c.jpg", "22.jpg"),
    ]
