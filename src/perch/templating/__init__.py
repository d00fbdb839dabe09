"""kida template integration for perch page helpers."""
