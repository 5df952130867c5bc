"""Buste Paga: Lohnabrechnungen (buste paga) aus Präsenzlisten erzeugen."""

__version__ = "1.0.0"
