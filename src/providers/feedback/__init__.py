"""Feedback persistence providers.

FileFeedbackStore keeps one text file per normalized title under
``feedback/`` and stages each submission under ``temp/`` first.
"""
