"""Unified Search - 다중 검색엔진 결과 집계 서비스."""

__version__ = "1.0.0"
