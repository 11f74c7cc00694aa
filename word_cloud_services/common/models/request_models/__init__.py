from .request_models import CloudSpec, RenderTaskArgs
