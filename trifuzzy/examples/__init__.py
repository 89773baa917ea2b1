from .demo_set import build_demo_set, demo_values, run_demo

__all__ = ["build_demo_set", "demo_values", "run_demo"]
