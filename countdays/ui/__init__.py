"""UI components."""
from .card import CountdownCard
from .dialog import CountdownDialog
from .window import CountdownWindow

__all__ = ['CountdownCard', 'CountdownDialog', 'CountdownWindow']
