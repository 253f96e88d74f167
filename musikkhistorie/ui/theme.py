"""Window colours."""

BG = "#191919"
