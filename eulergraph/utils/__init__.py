from .validation import EulerianReport, assert_eulerian, check_eulerian, reachable_from

__all__ = ["EulerianReport", "assert_eulerian", "check_eulerian", "reachable_from"]
