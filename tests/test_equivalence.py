"""Tests for equivalence relations."""

from sccsort import NATURAL, Equivalence, IdentityEquivalence, KeyEquivalence, NaturalEquivalence
from sccsort._equivalence import key_function


class TestEquivalences:
    def test_natural(self) -> None:
        assert NATURAL.equals("a", "a")
        assert not NATURAL.equals("a", "b")
        assert NATURAL.hash("a") == hash("a")

    def test_key(self) -> None:
        names = KeyEquivalence(str.casefold)
        assert names.equals("Core", "CORE")
        assert names.hash("Core") == names.hash("core")

    def test_identity(self) -> None:
        a, b = [1], [1]
        identity = IdentityEquivalence()
        assert identity.equals(a, a)
        assert not identity.equals(a, b)

    def test_protocol(self) -> None:
        assert isinstance(NATURAL, Equivalence)
        assert isinstance(KeyEquivalence(len), Equivalence)
        assert isinstance(IdentityEquivalence(), Equivalence)


class TestKeyFunction:
    def test_natural_uses_vertex_itself(self) -> None:
        assert key_function(None)("a") == "a"
        assert key_function(NaturalEquivalence())("a") == "a"

    def test_keys_follow_equivalence(self) -> None:
        key = key_function(KeyEquivalence(str.casefold))
        assert key("Lib") == key("LIB")
        assert key("lib") != key("app")
        assert len({key("Lib"), key("LIB"), key("app")}) == 2
