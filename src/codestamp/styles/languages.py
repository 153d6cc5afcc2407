# topmark:header:start
#
#   project      : CodeStamp
#   file         : languages.py
#   file_relpath : src/codestamp/styles/languages.py
#   license      : MIT
#   copyright    : (c) 2025 CodeStamp contributors
#
# topmark:header:end

"""Built-in language definitions.

Exports:
    LANGUAGES: Concrete definitions grouped by comment family. Language names
        follow editor language identifiers so that an editor-provided id and a
        path-detected id resolve to the same comment style.

Notes:
    - Pound-style languages force single-line stamps above the changed line.
    - Languages without a comment syntax are recognized with ``skip_processing``.
"""

from __future__ import annotations

from codestamp.styles.base import CBLOCK, POUND, REM, SLASH, XML, Language

LANGUAGES: list[Language] = [
    # --- '#' line comments, stamps above ---
    Language(
        name="python",
        extensions=(".py", ".pyi", ".pyw"),
        description="Python source files",
        style=POUND,
    ),
    Language(
        name="yaml",
        extensions=(".yaml", ".yml"),
        description="YAML documents",
        style=POUND,
    ),
    Language(
        name="shellscript",
        extensions=(".sh", ".bash", ".zsh"),
        filenames=(".bashrc", ".zshrc", ".profile"),
        description="POSIX/Bash/Zsh shell scripts",
        style=POUND,
    ),
    Language(
        name="dockerfile",
        extensions=(".dockerfile",),
        filenames=("Dockerfile", "Containerfile"),
        description="Dockerfiles",
        style=POUND,
    ),
    Language(
        name="makefile",
        extensions=(".mk",),
        filenames=("Makefile", "makefile", "GNUmakefile"),
        description="Make build scripts",
        style=POUND,
    ),
    Language(
        name="ignore",
        extensions=(".gitignore", ".dockerignore", ".npmignore"),
        description="Ignore-pattern files",
        style=POUND,
    ),
    Language(
        name="ini",
        extensions=(".ini", ".cfg"),
        filenames=(".editorconfig",),
        description="INI configuration files",
        style=POUND,
    ),
    Language(
        name="properties",
        extensions=(".properties", ".env"),
        description="Properties and dotenv files",
        style=POUND,
    ),
    Language(
        name="toml",
        extensions=(".toml",),
        description="TOML documents",
        style=POUND,
    ),
    Language(
        name="ruby",
        extensions=(".rb",),
        filenames=("Gemfile", "Rakefile"),
        description="Ruby source files",
        style=POUND,
    ),
    Language(
        name="perl",
        extensions=(".pl", ".pm"),
        description="Perl scripts and modules",
        style=POUND,
    ),
    Language(
        name="r",
        extensions=(".R", ".r"),
        description="R scripts",
        style=POUND,
    ),
    # --- markup, <!-- ... --> ---
    Language(
        name="html",
        extensions=(".html", ".htm"),
        description="HTML documents",
        style=XML,
    ),
    Language(
        name="xml",
        extensions=(".xml", ".xsd", ".xsl", ".svg"),
        description="XML documents",
        style=XML,
    ),
    Language(
        name="markdown",
        extensions=(".md", ".markdown"),
        description="Markdown documents",
        style=XML,
    ),
    # --- stylesheets, /* ... */ ---
    Language(
        name="css",
        extensions=(".css",),
        description="CSS stylesheets",
        style=CBLOCK,
    ),
    Language(
        name="scss",
        extensions=(".scss",),
        description="Sass (SCSS syntax) stylesheets",
        style=CBLOCK,
    ),
    Language(
        name="less",
        extensions=(".less",),
        description="Less stylesheets",
        style=CBLOCK,
    ),
    # --- batch, REM ---
    Language(
        name="bat",
        extensions=(".bat", ".cmd"),
        description="Windows batch files",
        style=REM,
    ),
    # --- '//' line comments, inline stamps ---
    Language(
        name="javascript",
        extensions=(".js", ".mjs", ".cjs", ".jsx"),
        description="JavaScript sources",
        style=SLASH,
    ),
    Language(
        name="typescript",
        extensions=(".ts", ".mts", ".cts", ".tsx"),
        description="TypeScript sources",
        style=SLASH,
    ),
    Language(
        name="c",
        extensions=(".c", ".h"),
        description="C sources and headers",
        style=SLASH,
    ),
    Language(
        name="cpp",
        extensions=(".cpp", ".cc", ".cxx", ".hpp", ".hh"),
        description="C++ sources and headers",
        style=SLASH,
    ),
    Language(
        name="csharp",
        extensions=(".cs",),
        description="C# sources",
        style=SLASH,
    ),
    Language(
        name="java",
        extensions=(".java",),
        description="Java sources",
        style=SLASH,
    ),
    Language(
        name="go",
        extensions=(".go",),
        description="Go sources",
        style=SLASH,
    ),
    Language(
        name="rust",
        extensions=(".rs",),
        description="Rust sources",
        style=SLASH,
    ),
    Language(
        name="kotlin",
        extensions=(".kt", ".kts"),
        description="Kotlin sources",
        style=SLASH,
    ),
    Language(
        name="swift",
        extensions=(".swift",),
        description="Swift sources",
        style=SLASH,
    ),
    # --- no comment syntax ---
    Language(
        name="json",
        extensions=(".json", ".jsonl"),
        description="JSON documents (no comments, never stamped)",
        skip_processing=True,
    ),
]
