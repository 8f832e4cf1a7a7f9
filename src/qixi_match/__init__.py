"""
qixi_match: matching de intereses para parejas.

Calcula un score de compatibilidad a partir de los intereses de
dos personas y recomienda actividades de cita.
"""

__version__ = "0.1.0"
