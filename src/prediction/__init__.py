"""
Congestion prediction module: time resolution, weather and batch prediction.
"""
