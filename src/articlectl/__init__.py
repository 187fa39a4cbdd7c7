"""articlectl: scaffold markdown articles from annotated frontmatter templates."""

__version__ = "0.1.0"
