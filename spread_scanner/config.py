"""
Load config from config.yaml with optional env overrides.
Single source of truth for chains, pairs, HTTP timeout, retry policy, report
output and webhook settings.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import yaml

from .core.errors import ConfigError
from .models import Chain, Pair
from .providers.base import ProviderKind
from .providers.resilience import RetryConfig

# Defaults if no YAML or env
_DEFAULTS: Dict[str, Any] = {
    "http": {"timeout_s": 12.0},
    "retry": {"max_retries": 2, "base_delay_s": 0.5},
    "reports": {"dir": "reports", "top_n": 20},
    "webhook": {"url": None, "timeout_s": 10.0},
    "price_lookup": {"base_url": "https://api.coingecko.com"},
    "chain_ids": None,
    "chains": [],
}

CONFIG_ENV_VAR = "SPREAD_SCANNER_CONFIG"


def _config_yaml_path() -> Path:
    """Config.yaml lives at repo root (parent of package dir)."""
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml(path: Optional[str | Path] = None) -> dict:
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else _config_yaml_path()
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not load config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def parse_chain_ids(value: Optional[str]) -> Optional[List[int]]:
    """'1, 137' -> [1, 137]; blank, non-numeric and zero entries are ignored."""
    if not value:
        return None
    ids: List[int] = []
    for part in str(value).split(","):
        try:
            cid = int(part.strip())
        except ValueError:
            continue
        if cid:
            ids.append(cid)
    return ids


def _env_overrides() -> dict:
    overrides: dict = {}
    chain_ids = parse_chain_ids(os.environ.get("CHAIN_IDS"))
    if chain_ids is not None:
        overrides["chain_ids"] = chain_ids
    webhook = os.environ.get("WEBHOOK_URL")
    if webhook:
        overrides.setdefault("webhook", {})["url"] = webhook
    reports_dir = os.environ.get("REPORTS_DIR")
    if reports_dir:
        overrides.setdefault("reports", {})["dir"] = reports_dir
    timeout = os.environ.get("HTTP_TIMEOUT_S")
    if timeout:
        try:
            overrides.setdefault("http", {})["timeout_s"] = float(timeout)
        except ValueError:
            raise ConfigError(f"HTTP_TIMEOUT_S must be a number, got {timeout!r}") from None
    return overrides


def get_config(path: Optional[str | Path] = None) -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml(path))
    merged = _deep_merge(merged, _env_overrides())
    return merged


def _pick(item: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        v = item.get(k)
        if v is not None and v != "":
            return v
    return default


def _opt_float(value: Any, field: str, where: str) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{where}: {field} must be a number, got {value!r}") from None


def _req_int(value: Any, field: str, where: str) -> int:
    if value is None or isinstance(value, bool):
        raise ConfigError(f"{where}: missing {field}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{where}: {field} must be an integer, got {value!r}") from None


def _req_str(value: Any, field: str, where: str) -> str:
    if value is None or not str(value).strip():
        raise ConfigError(f"{where}: missing {field}")
    return str(value).strip()


def parse_pair(item: Any, where: str = "pair") -> Pair:
    if not isinstance(item, dict):
        raise ConfigError(f"{where}: expected a mapping")
    from_symbol = _req_str(_pick(item, "from_symbol", "fromSymbol"), "from_symbol", where)
    to_symbol = _req_str(_pick(item, "to_symbol", "toSymbol"), "to_symbol", where)
    name = str(_pick(item, "name", default=f"{from_symbol}/{to_symbol}")).strip()
    where = f"{where} {name}"
    from_decimals = _req_int(_pick(item, "from_decimals", "fromDecimals"), "from_decimals", where)
    to_decimals = _req_int(_pick(item, "to_decimals", "toDecimals"), "to_decimals", where)
    if from_decimals < 0 or to_decimals < 0:
        raise ConfigError(f"{where}: decimals must be >= 0")
    lookup = _pick(item, "price_lookup_id", "priceLookupId", "coingecko_id", "coingeckoId")
    return Pair(
        name=name,
        from_symbol=from_symbol,
        to_symbol=to_symbol,
        from_address=_req_str(_pick(item, "from_address", "fromAddress"), "from_address", where),
        to_address=_req_str(_pick(item, "to_address", "toAddress"), "to_address", where),
        from_decimals=from_decimals,
        to_decimals=to_decimals,
        price_lookup_id=str(lookup).strip() if lookup else None,
        usd_sell_target=_opt_float(_pick(item, "usd_sell_target", "usdSellTarget"), "usd_sell_target", where),
        fixed_sell_amount=_opt_float(
            _pick(item, "fixed_sell_amount", "fixedSellAmount", "sampleSellAmount"),
            "fixed_sell_amount",
            where,
        ),
        min_buy_amount=_opt_float(_pick(item, "min_buy_amount", "minBuyAmount"), "min_buy_amount", where),
    )


def parse_chain(item: Any) -> Chain:
    if not isinstance(item, dict):
        raise ConfigError("chain entry: expected a mapping")
    chain_id = _req_int(_pick(item, "id", "chain_id", "chainId"), "id", "chain")
    name = str(_pick(item, "name", default=str(chain_id))).strip()
    where = f"chain {name}"

    raw_providers = _pick(item, "aggregators", "providers", "enabledProviders", default=[])
    if not isinstance(raw_providers, list):
        raise ConfigError(f"{where}: aggregators must be a list")
    providers = []
    for p in raw_providers:
        try:
            providers.append(ProviderKind.parse(p))
        except ValueError as exc:
            raise ConfigError(f"{where}: {exc}") from None

    raw_pairs = item.get("pairs") or []
    if not isinstance(raw_pairs, list):
        raise ConfigError(f"{where}: pairs must be a list")

    return Chain(
        id=chain_id,
        name=name,
        providers=tuple(providers),
        default_usd_sell=_opt_float(
            _pick(item, "default_usd_sell", "defaultUsdSell", "defaultUsdSellAmount"),
            "default_usd_sell",
            where,
        ),
        pairs=tuple(parse_pair(p, f"{where} pair #{i}") for i, p in enumerate(raw_pairs)),
    )


def load_chains(cfg: Dict[str, Any]) -> List[Chain]:
    """Parse the `chains` section into Chain objects. Raises ConfigError on invalid entries."""
    chains = cfg.get("chains") or []
    if not isinstance(chains, list):
        raise ConfigError("chains must be a list")
    return [parse_chain(c) for c in chains]


def filter_chains(chains: Sequence[Chain], allow: Optional[Iterable[int]]) -> List[Chain]:
    """Keep only allow-listed chain ids; None means every configured chain."""
    if allow is None:
        return list(chains)
    allowed = set(allow)
    return [c for c in chains if c.id in allowed]


# Convenience accessors
def http_timeout_s(cfg: Dict[str, Any]) -> float:
    return float(cfg["http"]["timeout_s"])


def reports_dir(cfg: Dict[str, Any]) -> str:
    return str(cfg["reports"]["dir"])


def top_n(cfg: Dict[str, Any]) -> int:
    return int(cfg["reports"]["top_n"])


def webhook_url(cfg: Dict[str, Any]) -> Optional[str]:
    return cfg["webhook"].get("url") or None


def webhook_timeout_s(cfg: Dict[str, Any]) -> float:
    return float(cfg["webhook"]["timeout_s"])


def price_lookup_base_url(cfg: Dict[str, Any]) -> str:
    return str(cfg["price_lookup"]["base_url"])


def chain_ids(cfg: Dict[str, Any]) -> Optional[List[int]]:
    ids = cfg.get("chain_ids")
    return [int(i) for i in ids] if ids else None


def retry_config(cfg: Dict[str, Any]) -> RetryConfig:
    retry = cfg.get("retry") or {}
    return RetryConfig(
        max_retries=int(retry.get("max_retries", 2)),
        base_delay_s=float(retry.get("base_delay_s", 0.5)),
    )
