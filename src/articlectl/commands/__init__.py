"""Click plumbing shared by the articlectl entry point."""
