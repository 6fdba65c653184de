from __future__ import annotations

import os


def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def _table_name(env_var: str, default: str) -> str:
    # SQL identifiers: the provisioning defaults used dashes.
    return (os.getenv(env_var) or default).strip().replace("-", "_")


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))

PLAYERS_TABLE = _table_name("PLAYERS_TABLE", "court_score_players")
MATCHES_TABLE = _table_name("MATCHES_TABLE", "court_score_matches")


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Split ``ALLOWED_ORIGINS`` into explicit origins, rejecting '*' and blanks."""
    raw = (raw or "").strip()
    if not raw:
        raise ValueError(
            "ALLOWED_ORIGINS environment variable must be set to a comma-separated "
            "list of trusted origins."
        )
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if not origins:
        raise ValueError("ALLOWED_ORIGINS must contain at least one non-empty origin.")
    if "*" in origins:
        raise ValueError(
            "ALLOWED_ORIGINS cannot include '*' (wildcard). Specify explicit, trusted origins."
        )
    return origins
