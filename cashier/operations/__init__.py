"""Operations layer for invoice presentation."""
