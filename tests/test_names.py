from ccoi.names import initials, is_linkable, normalize, prefer_name


def test_normalize_strips_country_suffix() -> None:
    assert normalize("Jane Doe (Hong Kong)") == "jane-doe"
    assert normalize("Jane Doe (Hong Kong)") == normalize("Jane Doe")


def test_normalize_collapses_punctuation_runs() -> None:
    assert normalize("  Dr. Mary-Ann  O'Neil ") == "dr-mary-ann-o-neil"


def test_normalize_falls_back_for_empty_result() -> None:
    assert normalize("") == "speaker"
    assert normalize("(Japan)") == "speaker"
    assert normalize("!!!") == "speaker"


def test_placeholders_are_not_linkable() -> None:
    for name in ["", "-", "TBC", "tbd", " Tbc "]:
        assert not is_linkable(name)


def test_role_labels_are_not_linkable() -> None:
    assert not is_linkable("Moderator")
    assert not is_linkable("All Panelists")
    assert not is_linkable("Hosts & Guests")
    # substring match also catches real names
    assert not is_linkable("Moderator Smith")


def test_real_names_are_linkable() -> None:
    assert is_linkable("Jane Doe")


def test_prefer_name_keeps_country_tag() -> None:
    assert prefer_name("Jane Doe", "Jane Doe (Hong Kong)") == "Jane Doe (Hong Kong)"
    assert prefer_name("Jane Doe (Hong Kong)", "Jane Doe") == "Jane Doe (Hong Kong)"
    assert prefer_name("Jane Doe (HK)", "Jane Doe (Hong Kong)") == "Jane Doe (HK)"
    assert prefer_name("Jane Doe", "jane doe") == "Jane Doe"


def test_initials() -> None:
    assert initials("Jane Doe (Hong Kong)") == "JD"
    assert initials("cher") == "CH"
    assert initials("   ") == ""
