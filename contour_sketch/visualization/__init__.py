"""
Guide geometry and alignment plots
"""

from .alignment_plot import scale_contour_to_canvas, guide_points, plot_alignment

__all__ = ['scale_contour_to_canvas', 'guide_points', 'plot_alignment']
