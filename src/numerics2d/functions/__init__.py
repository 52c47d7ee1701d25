"""
Function Types
==============
Real functions of one variable sharing the `Function` contract
(`eval`, `eval_point`, `eval_points`).

Classes:
    PolynomialFunction: Dense-coefficient polynomial.
    CubicSplineFunction: Natural cubic spline through a PointSet.
    LeastSquaresFunction: Online linear regression.
"""
