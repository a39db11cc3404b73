from anyrand.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.seed.seed_env == "ANYRAND_SEED"
    assert cfg.seed.value is None
    assert cfg.text.default_alphabet == "printable"
    assert cfg.text.min_length == cfg.text.max_length == 8
    assert cfg.logging.level == "WARNING"
