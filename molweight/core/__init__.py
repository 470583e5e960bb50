"""
Formula interpretation pipeline: tokenizer -> parser -> evaluator -> aggregator
"""
