"""
Environment variable loading utility.

Settings read their values from the process environment; this module lets a
deployment keep them in a plain ``KEY=value`` file instead.
"""
import os
import logging

logger = logging.getLogger(__name__)


def parse_env_line(line):
    """
    Parse a single line of an env file.

    Args:
        line: Raw line from the file.

    Returns:
        A (key, value) tuple, or None for blank lines and comments.
    """
    line = line.strip()
    if not line or line.startswith('#'):
        return None
    if line.startswith('export '):
        line = line[len('export '):].lstrip()
    if '=' not in line:
        raise ValueError(f"Malformed env line (missing '='): {line!r}")

    key, value = line.split('=', 1)
    key = key.strip()
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        value = value[1:-1]
    return key, value


def load_env_from_file(file_path, override=False):
    """
    Load environment variables from a file.

    Variables already set in the environment are kept unless ``override`` is
    true, so the real environment always wins over the file.

    Args:
        file_path: Path to the environment variable file.
        override: Replace variables that are already set.

    Returns:
        True if file was loaded successfully, False otherwise.
    """
    if not os.path.exists(file_path):
        logger.debug(f"Environment file not found: {file_path}")
        return False

    loaded = 0
    with open(file_path, 'r') as f:
        for number, raw in enumerate(f, start=1):
            try:
                parsed = parse_env_line(raw)
            except ValueError as e:
                logger.warning(f"{file_path}:{number}: {e}")
                continue
            if parsed is None:
                continue
            key, value = parsed
            if override or key not in os.environ:
                os.environ[key] = value
                loaded += 1

    logger.info(f"Loaded {loaded} environment variables from {file_path}")
    return True
