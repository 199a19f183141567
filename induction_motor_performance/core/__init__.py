"""Operating-point resolution and analysis driver."""

from .operating_point import (
    calculate_no_load_speed,
    calculate_loaded_speed,
    resolve_operating_point
)

from .analyzer import (
    AnalysisResult,
    MotorAnalyzer,
    sweep_parameter,
    analyze_motor
)

__all__ = [
    # Operating point
    'calculate_no_load_speed',
    'calculate_loaded_speed',
    'resolve_operating_point',

    # Analyzer
    'AnalysisResult',
    'MotorAnalyzer',
    'sweep_parameter',
    'analyze_motor'
]
