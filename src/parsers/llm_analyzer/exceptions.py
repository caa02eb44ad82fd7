class LLMAnalysisError(Exception):
    pass
