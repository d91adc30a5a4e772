"""Toonify Blend FastAPI REST API layer.

This package contains the FastAPI application and its Pydantic request
models. The Gradio studio and this API share everything under
:mod:`toonify.core`.

Modules
-------
main
    FastAPI application with all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request validation.
"""
