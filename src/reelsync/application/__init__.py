"""Application layer: configuration and the editor session facade."""
