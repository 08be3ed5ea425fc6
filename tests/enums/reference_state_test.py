from mtcmodel.enums import ReferenceState


def test_reference_state() -> None:
    assert set(ReferenceState.values()) == {
        "Unresolved",
        "Resolved",
    }

    assert ReferenceState.default() == ReferenceState.Unresolved
    assert ReferenceState.enum_name() == "reference.state"
    assert ReferenceState.enum_version() == "000"
