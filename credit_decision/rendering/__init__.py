"""Rendering layer projecting typed results into generic output maps."""

from .projector import CHECK_RESULT_LIST_KEY, render_check_result, render_check_results

__all__ = ["CHECK_RESULT_LIST_KEY", "render_check_result", "render_check_results"]
