"""Week resolution and NFL scoreboard helpers."""
