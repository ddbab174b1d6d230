import pytest

from qrbill_core.domain.value_objects import Party, Payee, Payer, ReferenceKind

FIELDS = {
    "name": "Max Mustermann",
    "street": "Musterstrasse 37",
    "postal_code": "6000",
    "city": "Luzern",
    "country": "CH",
}


class TestPartyFields:
    def test_locality_joins_postal_code_and_city(self) -> None:
        payee = Payee(**FIELDS)

        assert payee.locality == "6000 Luzern"

    def test_address_lines(self) -> None:
        payer = Payer(**FIELDS)

        assert payer.address_lines() == ["Max Mustermann", "Musterstrasse 37", "6000 Luzern"]

    def test_payee_and_payer_are_parties(self) -> None:
        assert isinstance(Payee(**FIELDS), Party)
        assert isinstance(Payer(**FIELDS), Party)


class TestPartyRoles:
    def test_payee_is_not_equal_to_payer_with_same_fields(self) -> None:
        assert Payee(**FIELDS) != Payer(**FIELDS)  # type: ignore[comparison-overlap]

    def test_payees_with_same_fields_are_equal(self) -> None:
        assert Payee(**FIELDS) == Payee(**FIELDS)

    def test_payees_with_different_fields_are_not_equal(self) -> None:
        assert Payee(**FIELDS) != Payee(**{**FIELDS, "city": "Bern"})


class TestPartyImmutability:
    def test_payee_is_frozen(self) -> None:
        payee = Payee(**FIELDS)

        with pytest.raises(AttributeError):
            payee.name = "Someone Else"  # type: ignore[misc]

    def test_payer_can_be_used_in_a_set(self) -> None:
        assert len({Payer(**FIELDS), Payer(**FIELDS)}) == 1


class TestReferenceKind:
    def test_values_are_wire_literals(self) -> None:
        assert [kind.value for kind in ReferenceKind] == ["QRR", "SCOR", "NON"]

    def test_lookup_by_value(self) -> None:
        assert ReferenceKind("SCOR") is ReferenceKind.SCOR
