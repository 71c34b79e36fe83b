from __future__ import annotations

"""
Built-in Icon Name Tables.

Static mapping of file names, extensions and name fragments to Seti icon
identifiers. The partials table is matched in declaration order, so more
specific fragments must be declared before broader ones.
"""

from typing import Dict

from filetree_markup.domain.tree_models import Definitions

FILES: Dict[str, str] = {
    "LICENSE": "seti:license",
    "LICENCE": "seti:license",
    "COPYING": "seti:license",
    "README": "seti:info",
    "CHANGELOG": "seti:clock",
    "Dockerfile": "seti:docker",
    "Makefile": "seti:makefile",
    "Procfile": "seti:heroku",
    "Gemfile": "seti:ruby",
    "Pipfile": "seti:python",
    "package.json": "seti:npm",
    "package-lock.json": "seti:npm",
    "pnpm-lock.yaml": "seti:npm",
    "yarn.lock": "seti:yarn",
    "tsconfig.json": "seti:tsconfig",
    "astro.config.mjs": "seti:astro",
    "vite.config.ts": "seti:vite",
    "vite.config.js": "seti:vite",
    ".gitignore": "seti:git",
    ".gitattributes": "seti:git",
    ".gitmodules": "seti:git",
    ".npmrc": "seti:npm",
    ".npmignore": "seti:npm",
    ".editorconfig": "seti:editorconfig",
    ".env": "seti:config",
    "favicon.ico": "seti:favicon",
    "requirements.txt": "seti:python",
    "setup.py": "seti:python",
    "pyproject.toml": "seti:python",
    "go.mod": "seti:go",
    "go.sum": "seti:go",
    "Cargo.toml": "seti:rust",
    "Cargo.lock": "seti:rust",
}

EXTENSIONS: Dict[str, str] = {
    ".astro": "seti:astro",
    ".md": "seti:markdown",
    ".mdx": "seti:markdown",
    ".markdown": "seti:markdown",
    ".rst": "seti:default",
    ".txt": "seti:default",
    ".json": "seti:json",
    ".jsonc": "seti:json",
    ".json5": "seti:json",
    ".yaml": "seti:yml",
    ".yml": "seti:yml",
    ".toml": "seti:config",
    ".ini": "seti:config",
    ".cfg": "seti:config",
    ".xml": "seti:xml",
    ".html": "seti:html",
    ".htm": "seti:html",
    ".css": "seti:css",
    ".scss": "seti:sass",
    ".sass": "seti:sass",
    ".less": "seti:less",
    ".js": "seti:javascript",
    ".mjs": "seti:javascript",
    ".cjs": "seti:javascript",
    ".jsx": "seti:react",
    ".ts": "seti:typescript",
    ".mts": "seti:typescript",
    ".cts": "seti:typescript",
    ".d.ts": "seti:typescript",
    ".tsx": "seti:react",
    ".vue": "seti:vue",
    ".svelte": "seti:svelte",
    ".py": "seti:python",
    ".pyi": "seti:python",
    ".rb": "seti:ruby",
    ".go": "seti:go",
    ".rs": "seti:rust",
    ".java": "seti:java",
    ".kt": "seti:kotlin",
    ".swift": "seti:swift",
    ".c": "seti:c",
    ".h": "seti:c",
    ".cpp": "seti:cpp",
    ".hpp": "seti:cpp",
    ".cs": "seti:c-sharp",
    ".php": "seti:php",
    ".sh": "seti:shell",
    ".bash": "seti:shell",
    ".zsh": "seti:shell",
    ".ps1": "seti:powershell",
    ".sql": "seti:db",
    ".svg": "seti:svg",
    ".png": "seti:image",
    ".jpg": "seti:image",
    ".jpeg": "seti:image",
    ".gif": "seti:image",
    ".webp": "seti:image",
    ".avif": "seti:image",
    ".ico": "seti:favicon",
    ".pdf": "seti:pdf",
    ".zip": "seti:zip",
    ".gz": "seti:zip",
    ".lock": "seti:lock",
    ".log": "seti:default",
}

PARTIALS: Dict[str, str] = {
    "Gruntfile": "seti:grunt",
    "gulpfile": "seti:gulp",
    "webpack": "seti:webpack",
    "rollup.config": "seti:rollup",
    "eslint": "seti:eslint",
    "prettier": "seti:config",
    "tailwind.config": "seti:config",
    "README": "seti:info",
    "CHANGELOG": "seti:clock",
    "LICENSE": "seti:license",
    "docker-compose": "seti:docker",
    "Dockerfile": "seti:docker",
    ".test.": "seti:config",
    ".spec.": "seti:config",
}

DEFAULT_DEFINITIONS = Definitions(files=FILES, extensions=EXTENSIONS, partials=PARTIALS)
