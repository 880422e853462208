from decimal import Decimal

from tradehub.core.config import Settings, WalletSettings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.project_name == "Province Trade Hub"
    assert settings.database_url.startswith("sqlite+aiosqlite")
    assert settings.wallet.credit_profits_on_topup is True
    assert settings.security.bcrypt_rounds == 12


def test_wallet_section_only_carries_used_options():
    assert set(WalletSettings.model_fields) == {"credit_profits_on_topup", "max_topup_amount"}


def test_nested_sections_read_from_environment(monkeypatch):
    monkeypatch.setenv("WALLET__CREDIT_PROFITS_ON_TOPUP", "false")
    monkeypatch.setenv("WALLET__MAX_TOPUP_AMOUNT", "5000")
    monkeypatch.setenv("SERVER__PORT", "9100")

    settings = Settings(_env_file=None)

    assert settings.wallet.credit_profits_on_topup is False
    assert settings.wallet.max_topup_amount == Decimal("5000")
    assert settings.port == 9100
