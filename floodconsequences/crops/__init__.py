"""Crop seasons, damage cases, duration damage curves and production cost functions."""