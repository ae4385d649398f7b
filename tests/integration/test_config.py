from __future__ import annotations

from powcalc.integration.config import MAX_DIGITS, DisplayConfig, load_display_config


def test_defaults_when_unset() -> None:
    assert load_display_config({}) == DisplayConfig()


def test_reads_all_settings() -> None:
    cfg = load_display_config(
        {
            "POWCALC_FIXED_DIGITS": "4",
            "POWCALC_SCI_DIGITS": " 6 ",
            "POWCALC_SCI_SMALL": "1e-5",
            "POWCALC_SCI_LARGE": "1e6",
        }
    )
    assert cfg == DisplayConfig(fixed_digits=4, scientific_digits=6, scientific_below=1e-5, scientific_above=1e6)


def test_digits_are_clamped() -> None:
    assert load_display_config({"POWCALC_FIXED_DIGITS": "99"}).fixed_digits == MAX_DIGITS
    assert load_display_config({"POWCALC_FIXED_DIGITS": "-3"}).fixed_digits == 0


def test_malformed_values_fall_back() -> None:
    cfg = load_display_config(
        {
            "POWCALC_FIXED_DIGITS": "ten",
            "POWCALC_SCI_DIGITS": "",
            "POWCALC_SCI_SMALL": "nan",
            "POWCALC_SCI_LARGE": "-1",
        }
    )
    assert cfg == DisplayConfig()


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("POWCALC_FIXED_DIGITS", "2")
    assert load_display_config().fixed_digits == 2
