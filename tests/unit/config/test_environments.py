"""
Unit tests for environment configuration.
"""

from config.environments import get_elasticsearch_config, get_logging_config


def test_defaults(monkeypatch):
    for name in ("ELASTIC_URL", "ELASTICSEARCH_URL", "ELASTIC_TIMEOUT", "ELASTICSEARCH_TIMEOUT",
                 "ELASTIC_VERIFY_CERTS", "ELASTIC_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
    
    config = get_elasticsearch_config()
    
    assert config["url"] == "http://localhost:9200"
    assert config["timeout_ms"] == 30000
    assert config["max_retries"] == 0
    assert config["verify_certs"] is True


def test_reads_environment_at_call_time(monkeypatch):
    monkeypatch.setenv("ELASTIC_URL", "https://es.example:9243")
    monkeypatch.setenv("ELASTIC_TIMEOUT", "5000")
    monkeypatch.setenv("ELASTIC_VERIFY_CERTS", "false")
    
    config = get_elasticsearch_config()
    
    assert config["url"] == "https://es.example:9243"
    assert config["timeout_ms"] == 5000
    assert config["verify_certs"] is False


def test_legacy_variable_names(monkeypatch):
    monkeypatch.delenv("ELASTIC_URL", raising=False)
    monkeypatch.setenv("ELASTICSEARCH_URL", "http://legacy:9200")
    
    assert get_elasticsearch_config()["url"] == "http://legacy:9200"


def test_logging_config(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    
    assert get_logging_config()["level"] == "DEBUG"
