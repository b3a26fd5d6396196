"""Root test configuration: a sample content folder"""

import pytest


CONTENT = {
    "index.md": "---\ntitle: Home\n---\n# Welcome\n",
    "about.md": "---\ntitle: About\n---\nAbout *us*.\n",
    "blog/index.md": "---\ntitle: Blog\n---\nAll posts.\n",
    "blog/hello-world.md": "---\ntitle: Hello World\ndate: 2024-01-02\n---\nhi *there*\n",
    "docs/intro/index.md": "No frontmatter here.\n",
    "docs/notes.txt": "not markdown",
}


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path):
    """A content folder covering leaf files, index files, and non-markdown files."""
    root = tmp_path / "data"
    for rel, text in CONTENT.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    return root
