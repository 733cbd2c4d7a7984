"""Shared datatypes for rfcreader stages."""

from .datatypes import NormalizationReport, ReadResult, RfcDocument, TextSegment

__all__ = ["TextSegment", "NormalizationReport", "RfcDocument", "ReadResult"]
