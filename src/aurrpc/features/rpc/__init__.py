"""
Summary: RPC request/response translation feature.
Why: Group query building, envelope handling, and record mapping together.
"""
