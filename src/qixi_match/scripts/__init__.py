"""Scripts ejecutables (python -m qixi_match.scripts.<nombre>)."""
