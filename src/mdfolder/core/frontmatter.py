"""YAML frontmatter splitting with a restricted, data-only loader"""

import logging
import re

import yaml

from mdfolder.core.models import FrontmatterResult, YamlLoad


LOGGER = logging.getLogger(__name__)

# Opening and closing delimiters are lines of exactly three hyphens.
FRONTMATTER_RE = re.compile(
    r'\A---(?:\r\n|\n|\r)(.+?)(?:\r\n|\n|\r)---(?:\r\n|\n|\r|\Z)(.*)\Z',
    re.DOTALL,
)

_TIMESTAMP_TAG = 'tag:yaml.org,2002:timestamp'
_BOOL_TAG = 'tag:yaml.org,2002:bool'

# JSON-style booleans only; yes/no/on/off stay strings.
_BOOL_RE = re.compile(r'^(?:true|True|TRUE|false|False|FALSE)$')


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps dates as strings and only reads true/false as booleans."""


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_TIMESTAMP_TAG, _BOOL_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontmatterLoader.add_implicit_resolver(_BOOL_TAG, _BOOL_RE, list('tTfF'))
FrontmatterLoader.add_constructor(_TIMESTAMP_TAG, yaml.SafeLoader.construct_yaml_str)


def load_yaml(text: str) -> YamlLoad:
    """Parse text as pure-data YAML. Never raises: any load error is a failed result."""
    try:
        return YamlLoad(ok=True, value=yaml.load(text, Loader=FrontmatterLoader))
    except Exception as e:
        # explicit tags (!!int abc, !!float x) fail in the constructor with non-YAML errors
        return YamlLoad(ok=False, error=f"{type(e).__name__}: {e}")


def parse_yaml_frontmatter(text: str) -> FrontmatterResult:
    """Split text into (body, meta).

    The parsed block is only used when it loads to a mapping; anything else
    (no block, malformed YAML, a scalar or a list) leaves the whole input as
    the body with empty metadata.
    """
    m = FRONTMATTER_RE.match(text)
    if not m:
        return FrontmatterResult(body=text, meta={})

    loaded = load_yaml(m.group(1))
    if not loaded.ok:
        LOGGER.warning("Could not parse YAML frontmatter: %s", loaded.error)
        return FrontmatterResult(body=text, meta={})
    if loaded.value is None:
        return FrontmatterResult(body=m.group(2), meta={})
    if not isinstance(loaded.value, dict):
        LOGGER.debug("Ignoring frontmatter of type %s", type(loaded.value).__name__)
        return FrontmatterResult(body=text, meta={})
    return FrontmatterResult(body=m.group(2), meta=loaded.value)
