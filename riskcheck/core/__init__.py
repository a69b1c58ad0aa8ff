"""
Core scoring layer: catalog, risk scorer, recommendation generator and
symptom matcher. All pure functions over an immutable catalog.
"""
