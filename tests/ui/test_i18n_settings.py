"""Tests for locale strings and command-line settings."""

from __future__ import annotations

import pytest

from blockade.core.enums import Rejection
from blockade.ui.i18n import LANGUAGES, set_language, t
from blockade.ui.settings import AppSettings, settings_from_args


class TestStrings:
    def test_languages(self) -> None:
        assert LANGUAGES == ["English", "Portuguese"]

    def test_unknown_language_falls_back_to_english(self) -> None:
        set_language("Klingon")
        assert t().btn_move == "Move"

    @pytest.mark.parametrize("language", ["English", "Portuguese"])
    def test_every_rejection_has_distinct_text(self, language: str) -> None:
        set_language(language)
        texts = [t().rejection(reason) for reason in Rejection]
        assert all(texts)
        assert len(set(texts)) == len(texts)

    def test_portuguese_rejection(self) -> None:
        set_language("Portuguese")
        assert t().rejection(Rejection.OFF_BOARD) == (
            "❌ Movimento inválido: Fora do tabuleiro."
        )


class TestSettingsFromArgs:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("BLOCKADE_LANGUAGE", "BLOCKADE_THEME", "BLOCKADE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        assert settings_from_args([]) == AppSettings()

    def test_flags(self) -> None:
        settings = settings_from_args(
            [
                "--language",
                "Portuguese",
                "--theme",
                "Slate",
                "--log-level",
                "debug",
                "--hide-coordinates",
                "--hide-valid-moves",
            ]
        )
        assert settings == AppSettings(
            language="Portuguese",
            log_level="DEBUG",
            board_theme="Slate",
            show_coordinates=False,
            show_valid_moves=False,
        )

    def test_environment_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOCKADE_LANGUAGE", "Portuguese")
        monkeypatch.setenv("BLOCKADE_LOG_LEVEL", "info")
        settings = settings_from_args([])
        assert settings.language == "Portuguese"
        assert settings.log_level == "INFO"

    def test_invalid_language_exits(self) -> None:
        with pytest.raises(SystemExit):
            settings_from_args(["--language", "Klingon"])

    @pytest.mark.parametrize(
        ("variable", "value"),
        [
            ("BLOCKADE_LANGUAGE", "Klingon"),
            ("BLOCKADE_THEME", "Bogus"),
            ("BLOCKADE_LOG_LEVEL", "loud"),
        ],
    )
    def test_invalid_environment_value_exits(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        variable: str,
        value: str,
    ) -> None:
        monkeypatch.setenv(variable, value)
        with pytest.raises(SystemExit):
            settings_from_args([])
        assert "invalid --" in capsys.readouterr().err

    def test_flag_overrides_invalid_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("BLOCKADE_THEME", "Bogus")
        assert settings_from_args(["--theme", "Slate"]).board_theme == "Slate"
