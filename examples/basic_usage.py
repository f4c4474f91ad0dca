"""Minimal example showing the container's core operations."""

from __future__ import annotations

from textseq import DynamicSequence


def main() -> None:
    languages = DynamicSequence.from_slice(["Java", "Python", "C", "C++", "Fortran"])

    print(languages.to_display_string())
    print("Index of C:", languages.index_of("C"))
    print("Usage:", languages.usage())

    languages.insert("Rust")
    print("After insert:", languages, f"(capacity={languages.capacity})")

    removed = languages.remove(1)
    print("Removed:", removed)
    print("After remove:", languages, f"usage={languages.usage():.2f}%")


if __name__ == "__main__":
    main()
