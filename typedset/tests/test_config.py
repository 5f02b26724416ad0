import logging

import pytest

from typedset import (
    Collectable,
    CollectionConfig,
    CollectionConfigurationError,
    TypedSet,
    configure_logging,
    load_config,
)


class Badge(Collectable):
    pass


def test_defaults():
    cfg = CollectionConfig()
    assert cfg.hash_strategy == "identity"
    assert cfg.log_level == "WARNING"


def test_config_normalizes_values():
    cfg = CollectionConfig(hash_strategy="  VALUE ", log_level="debug")
    assert cfg.hash_strategy == "value"
    assert cfg.log_level == "DEBUG"


def test_config_rejects_unknown_values():
    with pytest.raises(CollectionConfigurationError):
        CollectionConfig(hash_strategy="md5")

    with pytest.raises(CollectionConfigurationError):
        CollectionConfig(log_level="chatty")


def test_config_is_immutable():
    cfg = CollectionConfig()
    with pytest.raises(AttributeError):
        cfg.hash_strategy = "value"


def test_load_config_from_mapping():
    cfg = load_config({"TYPEDSET_HASH_STRATEGY": "value", "TYPEDSET_LOG_LEVEL": "info"})
    assert cfg == CollectionConfig(hash_strategy="value", log_level="INFO")


def test_load_config_blank_values_use_defaults():
    cfg = load_config({"TYPEDSET_HASH_STRATEGY": "  ", "TYPEDSET_LOG_LEVEL": ""})
    assert cfg == CollectionConfig()


def test_environment_selects_default_hash_strategy(monkeypatch):
    monkeypatch.setenv("TYPEDSET_HASH_STRATEGY", "value")

    s = TypedSet.of(Badge)
    s.add(Badge())
    s.add(Badge())

    assert s.count() == 1


def test_explicit_config_wins_over_environment(monkeypatch):
    monkeypatch.setenv("TYPEDSET_HASH_STRATEGY", "value")

    s = TypedSet.of(Badge, config=CollectionConfig())
    s.add(Badge())
    s.add(Badge())

    assert s.count() == 2


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("typedset")
    previous = logger.level
    try:
        configure_logging(CollectionConfig(log_level="DEBUG"))
        assert logger.level == logging.DEBUG
        assert logging.getLogger("typedset.collection").getEffectiveLevel() == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_bulk_operations_log_at_debug(caplog):
    s = TypedSet.of(Badge, config=CollectionConfig())
    with caplog.at_level(logging.DEBUG, logger="typedset"):
        s.add_all([Badge(), Badge()])

    assert "add_all: 2 item(s)" in caplog.text
