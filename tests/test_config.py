"""
Test Configuration - Externalized Test Data

Sample documents and expected values shared by the test modules.
Update values here when content rules change - no need to modify test scripts.

Structure:
- DOCUMENTS: Well-formed post documents, keyed by file name
- MALFORMED: Documents that must fail the build
- EXPECTED: Expected listing order, tag counts, etc.
"""

from typing import Dict


# =============================================================================
# WELL-FORMED DOCUMENTS
# =============================================================================

DOCUMENTS: Dict[str, str] = {
    "cargo-workspaces.md": """---
title: Getting started with Cargo workspaces
date: 2025-04-08
tags:
  - Rust
  - cargo
draft: false
summary: Splitting a crate into a workspace.
images: []
type: Blog
---

A workspace shares one `Cargo.lock` between crates.
""",
    "error-handling.md": """---
title: Error handling with thiserror
date: '2025-03-29'
tags: [rust, errors]
draft: true
summary: Typed errors for libraries.
images: []
type: Blog
---

Draft notes.
""",
    "async-rust.mdx": """---
title: Async Rust in 2024
date: 2024-10-26
tags:
  - rust
  - async
draft: false
summary: Where async Rust stands.
images:
  - /static/images/async-rust.png
type: Blog
---

Async fn in traits is stable.
""",
    "notes/release-notes.md": """---
title: Release notes roundup
date: 2024-01-15
tags: []
summary: Untagged post in a subdirectory.
---

Short body.
""",
}


# =============================================================================
# MALFORMED DOCUMENTS
# =============================================================================

MALFORMED: Dict[str, str] = {
    "bad_date": """---
title: Bad date
date: 2025-13-45
---

Body.
""",
    "missing_title": """---
date: 2025-01-01
---

Body.
""",
    "missing_date": """---
title: No date
---

Body.
""",
    "no_front_matter": "Just a body, no metadata.\n",
    "unterminated": """---
title: Never closed
date: 2025-01-01
""",
    "not_a_mapping": """---
- just
- a list
---
""",
    "invalid_yaml": """---
title: [unclosed
date: 2025-01-01
---
""",
    "draft_not_bool": """---
title: Odd draft
date: 2025-01-01
draft: maybe
---
""",
    "symbol_only_tag": """---
title: Crab post
date: 2025-01-01
tags: ["rust", "!!!"]
---
""",
}

# Bytes that are not valid UTF-8 (a UTF-16 byte order mark)
NOT_UTF8 = b"\xff\xfe---\ntitle: T\n"


# =============================================================================
# EXPECTED VALUES
# =============================================================================

EXPECTED = {
    # Public listing, newest first (draft excluded)
    "public_order": ["cargo-workspaces", "async-rust", "notes/release-notes"],

    # Every post including the draft, newest first
    "all_order": ["cargo-workspaces", "error-handling", "async-rust", "notes/release-notes"],

    # Tag counts over public posts ("Rust" and "rust" group together)
    "public_tag_counts": {"async": 1, "cargo": 1, "rust": 2},

    # Tag counts including drafts
    "all_tag_counts": {"async": 1, "cargo": 1, "errors": 1, "rust": 3},

    "output_files": ["posts.json", "tag-data.json", "projects.json", "feed.xml"],
}
