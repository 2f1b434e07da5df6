"""Terminal styling, rust-analyzer project files and worked Rust exercise solutions."""

__version__ = "0.1.0"