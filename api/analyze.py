"""Vercel serverless function for ranking skaters from score text."""

import json
import sys
from pathlib import Path
from urllib.parse import urlparse

import httpx

# Add the project root to the path so we can import the majority package
sys.path.insert(0, str(Path(__file__).parent.parent))

from majority.analyze import analyze_scores, AnalysisError
from majority.parser import ScoreTextParser

FETCH_TIMEOUT = 30.0


def handler(request):
    """Handle incoming requests to rank skaters.

    Accepts:
    - POST with JSON body: {"text": "..."} or {"url": "https://..."},
      optionally with "judges": <int>
    - POST with multipart form: file upload with 'file' field and optional
      'judges' field

    Returns JSON with the ranking result.
    """
    # Handle CORS preflight
    if request.method == "OPTIONS":
        return create_response(
            "",
            status=204,
            headers={
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Methods": "POST, OPTIONS",
                "Access-Control-Allow-Headers": "Content-Type",
            },
        )

    if request.method != "POST":
        return create_response(
            {"error": "Method not allowed. Use POST."},
            status=405,
        )

    try:
        content_type = request.headers.get("content-type", "")

        if "application/json" in content_type:
            body = request.body.decode("utf-8")
            data = json.loads(body)
            judges = data.get("judges", ScoreTextParser.DEFAULT_JUDGES)

            if data.get("text") is not None:
                content = data["text"]
            elif data.get("url"):
                content = fetch_url(data["url"])
            else:
                return create_response(
                    {"error": "Missing 'text' or 'url' in request body"},
                    status=400,
                )

        elif "multipart/form-data" in content_type:
            # Note: Vercel's request object handles multipart parsing
            file_data = request.files.get("file")
            if not file_data:
                return create_response(
                    {"error": "Missing 'file' in form data"},
                    status=400,
                )

            judges = request.form.get("judges", ScoreTextParser.DEFAULT_JUDGES)
            content = file_data.read()

        else:
            return create_response(
                {"error": f"Unsupported content type: {content_type}"},
                status=400,
            )

        try:
            judges = int(judges)
        except (TypeError, ValueError):
            return create_response(
                {"error": f"Invalid number of judges: {judges!r}"},
                status=400,
            )

        result = analyze_scores(content, judges=judges)

        return create_response(result.to_dict())

    except AnalysisError as e:
        return create_response(
            {"error": str(e)},
            status=400,
        )
    except json.JSONDecodeError as e:
        return create_response(
            {"error": f"Invalid JSON: {e}"},
            status=400,
        )
    except Exception as e:
        return create_response(
            {"error": f"Internal error: {e}"},
            status=500,
        )


def fetch_url(url: str) -> bytes:
    """Fetch score text from a URL."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise AnalysisError(f"Invalid URL scheme: {parsed.scheme}")

    try:
        with httpx.Client(follow_redirects=True, timeout=FETCH_TIMEOUT) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content
    except httpx.HTTPStatusError as e:
        raise AnalysisError(f"HTTP error fetching URL: {e.response.status_code}")
    except httpx.RequestError as e:
        raise AnalysisError(f"Error fetching URL: {e}")


def create_response(body, status: int = 200, headers: dict = None):
    """Create a response object for Vercel."""
    response_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }
    if headers:
        response_headers.update(headers)

    if isinstance(body, dict):
        body = json.dumps(body)

    # Return in format expected by Vercel Python runtime
    return {
        "statusCode": status,
        "headers": response_headers,
        "body": body,
    }
