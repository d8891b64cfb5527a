"""Tests for mizan.core.config_schema and Config.validated()."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from mizan.core.config import Config, reset_config
from mizan.core.config_schema import MizanConfig
from mizan.zakat.nisab import NisabStandard


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_config()
    yield
    reset_config()


@pytest.mark.smoke
class TestConfigSchema:
    def test_defaults_populate(self):
        cfg = MizanConfig()
        assert cfg.logging.level == "WARNING"
        assert cfg.zakat.currency == "USD"
        assert cfg.zakat.nisab_standard is NisabStandard.LOWER
        assert cfg.zakat.gold_nisab_grams == Decimal("87.48")
        assert cfg.zakat.silver_nisab_grams == Decimal("612.36")
        assert cfg.reminders.lead_days == 30
        assert cfg.logging.rotation == "10 MB"
        assert cfg.logging.retention == "7 days"

    def test_string_values_are_coerced(self):
        cfg = MizanConfig.model_validate(
            {
                "logging": {"level": "debug"},
                "zakat": {"currency": "eur", "nisab_standard": "silver", "rate": "0.025"},
                "reminders": {"lead_days": "10"},
            }
        )
        assert cfg.logging.level == "DEBUG"
        assert cfg.zakat.currency == "EUR"
        assert cfg.zakat.nisab_standard is NisabStandard.SILVER
        assert cfg.zakat.rate == Decimal("0.025")
        assert cfg.reminders.lead_days == 10

    def test_unknown_standard_fails(self):
        with pytest.raises(ValidationError):
            MizanConfig.model_validate({"zakat": {"nisab_standard": "platinum"}})

    def test_bad_currency_fails(self):
        with pytest.raises(ValidationError, match="three-letter"):
            MizanConfig.model_validate({"zakat": {"currency": "dollars"}})

    def test_non_positive_weight_fails(self):
        with pytest.raises(ValidationError, match="positive"):
            MizanConfig.model_validate({"zakat": {"gold_nisab_grams": "0"}})

    def test_rate_out_of_range_fails(self):
        with pytest.raises(ValidationError, match="fraction"):
            MizanConfig.model_validate({"zakat": {"rate": "2.5"}})

    def test_negative_lead_days_fails(self):
        with pytest.raises(ValidationError, match="negative"):
            MizanConfig.model_validate({"reminders": {"lead_days": -1}})

    def test_unknown_log_level_fails(self):
        with pytest.raises(ValidationError, match="log level"):
            MizanConfig.model_validate({"logging": {"level": "LOUD"}})

    def test_extra_sections_allowed(self):
        cfg = MizanConfig.model_validate({"ledger": {"backend": "sqlite"}})
        assert cfg.model_extra["ledger"] == {"backend": "sqlite"}


class TestConfigValidated:
    def test_validated_from_file(self, tmp_config_file):
        cfg = Config(config_file=tmp_config_file).validated()
        assert cfg.zakat.currency == "GBP"
        assert cfg.zakat.nisab_standard is NisabStandard.GOLD
        assert cfg.zakat.gold_nisab_grams == Decimal("85")
        assert cfg.reminders.lead_days == 14

    def test_validated_from_env(self, monkeypatch):
        monkeypatch.setenv("MIZAN_REMINDERS__LEAD_DAYS", "45")
        cfg = Config().validated()
        assert cfg.reminders.lead_days == 45

    def test_validated_rejects_bad_env(self, monkeypatch):
        monkeypatch.setenv("MIZAN_ZAKAT__RATE", "abc")
        with pytest.raises(ValidationError):
            Config().validated()

    def test_log_rotation_from_env(self, monkeypatch):
        monkeypatch.setenv("MIZAN_LOGGING__ROTATION", "1 day")
        monkeypatch.setenv("MIZAN_LOGGING__RETENTION", "30 days")
        cfg = Config().validated()
        assert cfg.logging.rotation == "1 day"
        assert cfg.logging.retention == "30 days"
