#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Basic curve sampling example
"""

import numpy as np

from curve_sampler import BezierCurve, CurveConfig, Degenerate


def sampling_example():
    """Build a cubic, sample it evenly and print the display vectors"""
    print("=== Cubic curve sampling ===")

    config = CurveConfig.from_dict({
        'segmentCount': 200,
        'tangentDisplayLength': 20,
        'curvatureDisplayLength': 15,
    })
    curve = BezierCurve(config=config, sample_count=5, verbose=True)

    # Control points are added one by one, as a user would click them
    for point in [(0, 0), (40, 120), (160, 120), (200, 0)]:
        curve.add_control_point(point)

    print(f"Degree: {curve.degree}")
    print(f"Discretized length: {curve.arc_length:.4f}")
    print(f"Integrated length:  {curve.exact_arc_length():.4f}")

    for sample in curve.samples:
        print(f"  {sample}  distance={sample.distance:.2f}  "
              f"tangent={np.round(sample.tangent, 2)}  curvature={np.round(sample.curvature, 2)}")


def editing_example():
    """Move and remove control points; every edit resamples the curve"""
    print("\n=== Editing ===")

    curve = BezierCurve([(0, 0), (50, 100), (100, 0)], sample_count=3)
    print(f"Before move: {curve}")

    curve.move_control_point(1, (50, -100))
    print(f"After move:  {curve}")
    print(f"Curvature at u=0.5 points {'up' if curve.curvature_vector_at(0.5)[1] > 0 else 'down'}")

    curve.remove_control_point(1)
    curve.remove_control_point(0)
    print(f"One point left: {curve}")


def degenerate_example():
    """Coincident control points have no tangent direction"""
    print("\n=== Degenerate tangent ===")

    curve = BezierCurve([(10, 10), (10, 10)])
    try:
        curve.tangent_vector_at(0.5)
    except Degenerate as e:
        print(f"Tangent unavailable: {e}")


if __name__ == "__main__":
    sampling_example()
    editing_example()
    degenerate_example()
