"""
Prompt Logger.

Writes each completion call (prompts + raw reply) to a markdown file for
debugging extraction quality. Enabled via LOG_PROMPTS=1 or the CLI's
--log-prompts flag; off by default.
"""

import json
from datetime import datetime
from pathlib import Path

LOG_DIR = Path("prompt_logs")

_enabled: bool = False

# Session tracking
_session_id: str | None = None
_call_counter: int = 0


def enable_prompt_logging(enabled: bool = True) -> None:
    """Enable or disable prompt logging."""
    global _enabled
    _enabled = enabled
    if enabled:
        LOG_DIR.mkdir(exist_ok=True)


def _get_session_dir() -> Path:
    global _session_id
    if _session_id is None:
        _session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_dir = LOG_DIR / _session_id
    session_dir.mkdir(parents=True, exist_ok=True)
    return session_dir


def _format_response(response: str) -> str:
    # Pretty-print when the reply is JSON, otherwise show it verbatim
    try:
        return f"```json\n{json.dumps(json.loads(response), indent=2)}\n```\n"
    except ValueError:
        return f"```\n{response}\n```\n"


def log_prompt(
    *,
    label: str,
    model: str,
    system_prompt: str,
    user_prompt: str,
    response: str | None = None,
    error: str | None = None,
) -> Path | None:
    """
    Log a prompt and its reply to a file.

    Returns:
        Path to the log file, or None if logging is disabled
    """
    if not _enabled:
        return None

    global _call_counter
    _call_counter += 1

    filepath = _get_session_dir() / f"{_call_counter:02d}_{label}.md"

    content = f"""# LLM Call: {label}

**Time:** {datetime.now().isoformat()}
**Model:** {model}

---

## System Prompt

```
{system_prompt}
```

---

## User Prompt

```
{user_prompt}
```

---

## Response

"""

    if error:
        content += f"**ERROR:** {error}\n"
    elif response is not None:
        content += _format_response(response)
    else:
        content += "(No response)\n"

    filepath.write_text(content, encoding="utf-8")
    return filepath

