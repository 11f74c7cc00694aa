from .throttled_fetch import throttled
