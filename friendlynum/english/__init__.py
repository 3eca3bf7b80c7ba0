"""Helpers for friendlier English output: plurals and word series."""