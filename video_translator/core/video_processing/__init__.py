"""
Video processing backend.

Serverless-style functions that turn an uploaded video into translated
speech: extract audio, transcribe, translate, synthesize. Progress is
written to the job record after every step.
"""
