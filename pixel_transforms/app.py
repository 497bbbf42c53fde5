from __future__ import annotations

import io
import logging
from dataclasses import asdict, fields
from typing import Mapping

from flask import Flask, jsonify, request
from PIL import Image

from . import __version__
from .config import COOL_MODES, SETTINGS, configure_logging
from .infrastructure.cache import CACHE, cache_key
from .infrastructure.network import FETCHER, SourceFetcher, join_base_and_path
from .infrastructure.responses import encode_png, send_png, send_png_bytes
from .processing.pipeline import TRANSFORMS, apply_transform, get_transform

APP_VERSION = __version__

logger = logging.getLogger(__name__)


def resolve_source_url(args: Mapping[str, str]) -> str:
    """Pick the source image URL from request arguments.

    ``source_url`` wins outright; ``source_base`` plus ``source_path`` are joined
    otherwise; with neither, the configured ``SOURCE_URL`` is used.
    """

    direct = args.get("source_url")
    if direct:
        return direct
    base = args.get("source_base")
    path = args.get("source_path")
    if base and path:
        return join_base_and_path(base, path)
    if base:
        return base
    return SETTINGS.source_url


def _parse_delta(raw: str | None) -> int:
    if raw is None or raw == "":
        return SETTINGS.default_delta
    return int(raw)


def _decode_upload() -> Image.Image:
    upload = request.files.get("image")
    data = upload.read() if upload is not None else request.get_data()
    if not data:
        raise ValueError("No image supplied")
    try:
        return Image.open(io.BytesIO(data)).convert("RGBA")
    except (OSError, Image.DecompressionBombError) as exc:
        raise ValueError(f"Could not decode image: {exc}") from exc


def create_app(fetcher: SourceFetcher | None = None) -> Flask:
    configure_logging()
    app = Flask(__name__)
    source_fetcher = fetcher or FETCHER

    @app.route("/transform/<name>", methods=["GET", "POST"])
    def transform(name: str):
        try:
            spec = get_transform(name)
            delta = _parse_delta(request.args.get("delta"))
        except ValueError as exc:
            return (str(exc), 400)

        cool_mode = (request.args.get("cool_mode") or "").lower() or None
        if cool_mode is not None and cool_mode not in COOL_MODES:
            return (f"Unknown cool mode {cool_mode!r}; expected one of {', '.join(COOL_MODES)}", 400)

        if request.method == "POST":
            try:
                src = _decode_upload()
            except ValueError as exc:
                return (str(exc), 400)
            return send_png(apply_transform(spec.name, src, delta, cool_mode=cool_mode))

        source_url = resolve_source_url(request.args)
        key = cache_key(spec.name, delta, cool_mode, source_url)
        cached = CACHE.get(key)
        if cached is not None:
            return send_png_bytes(cached)

        try:
            src = source_fetcher.fetch_source(source_url)
        except RuntimeError as exc:
            logger.error("Source unavailable for %s: %s", spec.name, exc)
            fallback = CACHE.get_stale(key)
            if fallback is not None:
                return send_png_bytes(fallback)
            return (f"Source Error: {exc}", 502)

        data = encode_png(apply_transform(spec.name, src, delta, cool_mode=cool_mode))
        CACHE.put(key, data)
        return send_png_bytes(data)

    @app.route("/raw")
    def raw():
        try:
            return send_png(source_fetcher.fetch_source(resolve_source_url(request.args)))
        except RuntimeError as exc:
            logger.error("Source unavailable: %s", exc)
            return (str(exc), 502)

    @app.route("/health")
    def health():
        return jsonify(
            ok=True,
            version=APP_VERSION,
            cool_mode=SETTINGS.cool_mode,
            transforms=list(TRANSFORMS),
        )

    @app.route("/settings", methods=["GET", "PATCH"])
    def settings_view():
        if request.method == "GET":
            return jsonify(asdict(SETTINGS))

        payload = request.get_json(silent=True) or {}
        errors: dict[str, str] = {}
        applied: dict[str, object] = {}

        for field in fields(SETTINGS):
            if field.name not in payload:
                continue

            raw_value = payload[field.name]
            try:
                if field.type is int:
                    coerced = int(raw_value)
                elif field.type is float:
                    coerced = float(raw_value)
                else:
                    coerced = str(raw_value)
            except (TypeError, ValueError):
                errors[field.name] = f"Expected {field.type.__name__}"
                continue

            if field.name == "cool_mode":
                coerced = str(coerced).lower()
                if coerced not in COOL_MODES:
                    errors[field.name] = f"Expected one of {', '.join(COOL_MODES)}"
                    continue

            setattr(SETTINGS, field.name, coerced)
            applied[field.name] = coerced

        if applied:
            CACHE.clear()
            logger.info("Settings updated: %s", applied)

        status = 400 if errors else 200
        return (
            jsonify(updated=applied, errors=errors, settings=asdict(SETTINGS)),
            status,
        )

    @app.route("/")
    def index():
        return jsonify(
            version=APP_VERSION,
            transforms=[
                {
                    "name": spec.name,
                    "label": spec.label,
                    "uses_delta": spec.uses_delta,
                    "href": f"/transform/{spec.name}",
                }
                for spec in TRANSFORMS.values()
            ],
            endpoints=["/transform/<name>", "/raw", "/health", "/settings"],
        )

    return app


# Module-level application for WSGI servers (``pixel_transforms.app:app``).
app = create_app()
application = app
