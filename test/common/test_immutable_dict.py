from collections.abc import Callable
from typing import Any

from assertpy import assert_that
from assertpy import soft_assertions
import pytest

from hook_fmt.common import ImmutableDict


@pytest.fixture(scope="module")
def sample_mapping() -> dict[str, tuple[str, ...]]:
    return {"rust": ("Cargo.toml",), "java": ("pom.xml", "build.gradle")}


@pytest.fixture(scope="module")
def imm(
    sample_mapping: dict[str, tuple[str, ...]],
) -> ImmutableDict[str, tuple[str, ...]]:
    return ImmutableDict(sample_mapping)


def test_lookup_and_iteration_match_dict(
    imm: ImmutableDict[str, tuple[str, ...]],
    sample_mapping: dict[str, tuple[str, ...]],
) -> None:
    with soft_assertions():
        assert_that(imm["rust"]).is_equal_to(("Cargo.toml",))
        assert_that(imm.get("go")).is_none()
        assert_that(list(imm)).is_equal_to(list(sample_mapping))
        assert_that(imm).is_equal_to(sample_mapping)


@pytest.mark.parametrize(
    "mutation",
    [
        lambda d: d.__setitem__("go", ("go.mod",)),
        lambda d: d.__delitem__("rust"),
        lambda d: d.clear(),
        lambda d: d.pop("rust"),
        lambda d: d.popitem(),
        lambda d: d.setdefault("go", ("go.mod",)),
        lambda d: d.update({"go": ("go.mod",)}),
    ],
    ids=["setitem", "delitem", "clear", "pop", "popitem", "setdefault", "update"],
)
def test_mutation_raises_type_error(
    imm: ImmutableDict[str, tuple[str, ...]],
    sample_mapping: dict[str, tuple[str, ...]],
    mutation: Callable[[Any], Any],
) -> None:
    with pytest.raises(TypeError):
        mutation(imm)
    assert_that(imm).is_equal_to(sample_mapping)


def test_in_place_union_raises_type_error(
    sample_mapping: dict[str, tuple[str, ...]],
) -> None:
    imm = ImmutableDict(sample_mapping)
    with pytest.raises(TypeError):
        imm |= {"go": ("go.mod",)}


def test_union_operator_returns_new_plain_dict(
    imm: ImmutableDict[str, tuple[str, ...]],
) -> None:
    merged = imm | {"go": ("go.mod",)}
    assert_that(merged).contains_key("go")
    assert_that(imm).does_not_contain_key("go")


def test_hash_is_stable_and_content_based(
    imm: ImmutableDict[str, tuple[str, ...]],
    sample_mapping: dict[str, tuple[str, ...]],
) -> None:
    assert_that(hash(imm)).is_equal_to(hash(ImmutableDict(sample_mapping)))
    assert_that({imm: "ok"}[ImmutableDict(sample_mapping)]).is_equal_to("ok")


def test_repr(imm: ImmutableDict[str, tuple[str, ...]]) -> None:
    assert_that(repr(imm)).starts_with("ImmutableDict({")
    assert_that(eval(repr(imm))).is_equal_to(imm)
