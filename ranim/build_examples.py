"""Build the example gallery of the website.

Each example is run, and its rendered outputs are collected into the static
site. Its source is stored as TOML metadata and a markdown page is written for it.
"""

from __future__ import annotations

import argparse
import hashlib
import os
import shutil
import subprocess
import tomllib
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Sequence

import tomli_w

__all__ = [
    "EXCLUDE_EXAMPLES",
    "HIDE_EXAMPLES",
    "ExampleMeta",
    "code_hash",
    "get_examples",
    "run_example",
    "copy_output_files",
    "copy_file",
    "create_example_page",
    "clean_nonexistent_examples",
    "main",
]

EXCLUDE_EXAMPLES = ("test", "thesis")
HIDE_EXAMPLES = (
    "getting_started0",
    "getting_started1",
    "getting_started2",
    "getting_started3",
)

_PREVIEW_EXTENSIONS = ("png", "jpg")
_OUTPUT_EXTENSIONS = ("mp4", "png", "jpg")


@dataclass
class ExampleMeta:
    """Metadata of one example as stored in the website's data directory."""

    name: str
    code: str
    hash: str
    preview_imgs: list[str] = field(default_factory=list)
    output_files: list[str] = field(default_factory=list)

    def to_toml(self) -> str:
        return tomli_w.dumps(asdict(self))

    @classmethod
    def from_toml(cls, text: str) -> ExampleMeta:
        data = tomllib.loads(text)
        return cls(
            name=str(data["name"]),
            code=str(data["code"]),
            hash=str(data["hash"]),
            preview_imgs=[str(x) for x in data["preview_imgs"]],
            output_files=[str(x) for x in data["output_files"]],
        )

    @classmethod
    def load(cls, path: str | os.PathLike) -> ExampleMeta | None:
        """Read metadata from ``path``; ``None`` if it is missing or malformed."""
        try:
            return cls.from_toml(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, KeyError, TypeError):
            return None


def code_hash(code: str) -> str:
    """Return the lower-case hex SHA-1 digest of ``code``."""
    return hashlib.sha1(code.encode("utf-8")).hexdigest()


def _trim_suffix(name: str, suffix: str) -> str:
    while name.endswith(suffix):
        name = name[: -len(suffix)]
    return name


def get_examples(examples_dir, example_filter: Sequence[str]) -> list[Path]:
    """List example directories, skipping excluded ones and keeping only filtered names."""
    dirs = sorted(
        entry
        for entry in Path(examples_dir).iterdir()
        if entry.is_dir() and entry.name not in EXCLUDE_EXAMPLES
    )
    if example_filter:
        wanted = set(example_filter)
        dirs = [d for d in dirs if d.name in wanted]
    return dirs


def run_example(example_name: str, workspace_root) -> None:
    """Run an example in release mode, raising ``RuntimeError`` if it fails."""
    print(f"Running example: {example_name}")
    result = subprocess.run(
        ["cargo", "run", "--example", example_name, "--release"],
        cwd=workspace_root,
        check=False,
    )
    if result.returncode != 0:
        raise RuntimeError(f"example {example_name} failed to run")


def copy_file(source, target_dir) -> str:
    """Copy ``source`` into ``target_dir`` and return its file name."""
    source = Path(source)
    shutil.copy(source, Path(target_dir) / source.name)
    return source.name


def copy_output_files(source_dir, target_dir) -> tuple[list[str], list[str]]:
    """Copy preview images and output files from ``source_dir`` into ``target_dir``.

    Returns the names of the copied preview images and output files. Raises
    ``FileNotFoundError`` if no output file was found.
    """
    preview_imgs: list[str] = []
    output_files: list[str] = []

    for root, dirs, files in os.walk(source_dir):
        dirs.sort()
        for name in sorted(files):
            path = Path(root) / name
            ext = path.suffix[1:] if path.suffix else None
            message = f"Found {name!r}"
            if name.startswith("preview"):
                message += ", preview file"
                if ext in _PREVIEW_EXTENSIONS:
                    message += ", copying..."
                    preview_imgs.append(copy_file(path, target_dir))
            elif ext is not None:
                message += ", output file"
                if ext in _OUTPUT_EXTENSIONS:
                    message += ", copying..."
                    output_files.append(copy_file(path, target_dir))
            print(message)

    if not output_files:
        raise FileNotFoundError(f"no output files found in {source_dir}")
    return preview_imgs, output_files


def create_example_page(example_name: str, example_dir, website_content_examples_dir) -> None:
    """Write the markdown page of an example, including its README if present."""
    readme_path = Path(example_dir) / "README.md"
    page_path = Path(website_content_examples_dir) / f"{example_name}.md"

    content = f'+++\ntitle = "{example_name}"\ntemplate = "examples-page.html"\n+++\n\n'
    if readme_path.exists():
        readme = readme_path.read_text(encoding="utf-8")
        content += readme
        if not readme.endswith("\n"):
            content += "\n"
        if not content.endswith("\n\n"):
            content += "\n"
    content += f"!example-{example_name}\n"
    page_path.write_text(content, encoding="utf-8")


def clean_nonexistent_examples(
    example_dirs,
    output_dir,
    website_data_dir,
    website_static_examples_dir,
    website_content_examples_dir,
) -> None:
    """Remove outputs, data, static files and pages of examples that no longer exist."""
    print("Cleaning outputs of removed examples...")
    existing = {Path(p).name for p in example_dirs}

    output_dir = Path(output_dir)
    if output_dir.exists():
        for entry in output_dir.iterdir():
            if entry.is_dir() and entry.name not in existing and entry.name not in EXCLUDE_EXAMPLES:
                print(f"Removing from output: {entry.name}")
                shutil.rmtree(entry)

    data_dir = Path(website_data_dir)
    if data_dir.exists():
        for entry in data_dir.iterdir():
            if entry.is_file() and entry.name.endswith(".toml"):
                if _trim_suffix(entry.name, ".toml") not in existing:
                    print(f"Removing from website/data: {entry.name}")
                    entry.unlink()

    static_dir = Path(website_static_examples_dir)
    if static_dir.exists():
        for entry in static_dir.iterdir():
            if entry.is_dir() and entry.name not in existing:
                print(f"Removing from website/static/examples: {entry.name}")
                shutil.rmtree(entry)

    content_dir = Path(website_content_examples_dir)
    if content_dir.exists():
        for entry in content_dir.iterdir():
            if entry.is_file() and entry.name.endswith(".md"):
                stem = _trim_suffix(entry.name, ".md")
                if stem not in existing and stem != "_index":
                    print(f"Removing from website/content/examples: {entry.name}")
                    entry.unlink()

    print("Cleaning done")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="build ranim examples")
    parser.add_argument(
        "examples",
        nargs="*",
        metavar="EXAMPLES",
        help="examples to process; all examples when none are given",
    )
    parser.add_argument("--lazy-run", action="store_true")
    parser.add_argument(
        "--clean",
        action="store_true",
        help="remove output files of examples that no longer exist",
    )
    parser.add_argument(
        "--workspace-root",
        type=Path,
        default=Path.cwd(),
        help="root of the workspace (default: current directory)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    workspace_root: Path = args.workspace_root

    examples_dir = workspace_root / "examples"
    website_root = workspace_root / "website"
    website_data_dir = website_root / "data"
    website_static_examples_dir = website_root / "static" / "examples"
    website_content_examples_dir = website_root / "content" / "examples"
    output_dir = workspace_root / "output"

    for directory in (website_static_examples_dir, website_data_dir, website_content_examples_dir):
        directory.mkdir(parents=True, exist_ok=True)

    example_dirs = get_examples(examples_dir, args.examples)
    print(f"Found {len(example_dirs)} examples: {[d.name for d in example_dirs]}")

    if args.clean:
        clean_nonexistent_examples(
            example_dirs,
            output_dir,
            website_data_dir,
            website_static_examples_dir,
            website_content_examples_dir,
        )

    for example_dir in example_dirs:
        name = example_dir.name
        print(f"Processing example: {name}")

        code = (example_dir / "main.rs").read_text(encoding="utf-8")
        fresh = ExampleMeta(
            name=name,
            code=f"```rust,linenos\n{code}\n```",
            hash=code_hash(code),
        )
        meta_path = website_data_dir / f"{name}.toml"
        old_meta = ExampleMeta.load(meta_path)
        meta = replace(old_meta, code=fresh.code, hash=fresh.hash) if old_meta else fresh

        needs_run = (
            not args.lazy_run
            or old_meta is None
            or old_meta.hash != meta.hash
            or not old_meta.output_files
        )
        if needs_run:
            run_example(name, workspace_root)
            example_output_dir = website_static_examples_dir / name
            example_output_dir.mkdir(parents=True, exist_ok=True)
            previews, outputs = copy_output_files(output_dir / name, example_output_dir)
            meta.preview_imgs = [f"/examples/{name}/{p}" for p in previews]
            meta.output_files = [f"/examples/{name}/{p}" for p in outputs]

        meta_path.write_text(meta.to_toml(), encoding="utf-8")

        if name not in HIDE_EXAMPLES:
            create_example_page(name, example_dir, website_content_examples_dir)

        print(f"Example {name} done")

    print("All examples done")
    return 0