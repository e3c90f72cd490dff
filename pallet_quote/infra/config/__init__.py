"""설정 및 입력 파일 로딩 인프라."""

from pallet_quote.infra.config.quote_request_loader import (
    load_quote_request,
    quote_request_from_dict,
)
from pallet_quote.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = ["load_quote_request", "quote_request_from_dict", "YamlConfigLoader"]
