from prometheus_client import Counter, Histogram

# Generator
generation_requests = Counter(
    'austin_generation_requests_total',
    'Generated content responses',
    ['source']  # live, fallback
)

generation_fallbacks = Counter(
    'austin_generation_fallbacks_total',
    'Responses served from the fallback set',
    ['reason']  # no_credential, parse_error, api_error
)

image_errors = Counter(
    'austin_image_errors_total',
    'Protest sign image generation failures'
)

generation_latency = Histogram(
    'austin_generation_latency_seconds',
    'Content generation latency',
    buckets=(0.1, 1, 5, 10, 20, 60)
)
