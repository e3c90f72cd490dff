r"""Pallet Quote 진입점.

실행:
    pallet-quote scan -r recording.jsonl [-c config.yaml] [--strategy manual]
    pallet-quote quote -q request.yaml [-c config.yaml]
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys

from pallet_quote.domain.entities.quote import QuoteResponse
from pallet_quote.domain.enums import QuoteStatus, ScanStrategy
from pallet_quote.domain.events.pallet_events import (
    MeasurementCompletedEvent,
    QuoteStateChangedEvent,
    ScanFailedEvent,
    ScanSnapshotEvent,
)
from pallet_quote.domain.exceptions import DomainError
from pallet_quote.domain.value_objects.geometry import Point3D
from pallet_quote.domain.value_objects.scan import DeviceCapabilities
from pallet_quote.infra.config.quote_request_loader import load_quote_request
from pallet_quote.infra.config.yaml_config_loader import YamlConfigLoader
from pallet_quote.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from pallet_quote.infra.http.quote_http_client import RequestsQuoteGateway
from pallet_quote.infra.mqtt.mqtt_client import MqttClient
from pallet_quote.infra.mqtt.mqtt_event_publisher import MqttEventPublisher
from pallet_quote.infra.recording.jsonl_recording import (
    read_recording,
    RecordingFormatError,
)
from pallet_quote.usecase.ports.config_port import AppConfig
from pallet_quote.usecase.ports.event_publisher import EventPublisher
from pallet_quote.usecase.request_quote import RequestQuote
from pallet_quote.usecase.scan_session import ScanSession
from pallet_quote.usecase.scanner_factory import create_scanner

logger = logging.getLogger('pallet_quote')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pallet-quote',
        description='Pallet dimension scanning and freight quoting',
    )
    parser.add_argument(
        '-c', '--config_file', type=Path, default=None,
        help='Path to the config YAML file',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    scan = sub.add_parser('scan', help='Replay a recorded AR scan')
    scan.add_argument(
        '-r', '--recording', type=Path, required=True,
        help='Path to the JSONL scan recording',
    )
    scan.add_argument(
        '--strategy', choices=[s.value for s in ScanStrategy], default=None,
        help='Override the configured scan strategy',
    )

    quote = sub.add_parser('quote', help='Request a freight quote')
    quote.add_argument(
        '-q', '--request', type=Path, required=True,
        help='Path to the quote request YAML file',
    )
    return parser


def _build_publisher(
    config: AppConfig,
) -> tuple[EventPublisher, MqttClient | None]:
    """설정에 따라 인메모리 또는 MQTT 미러링 발행자를 만든다."""
    if not config.mqtt.enabled:
        return InMemoryEventPublisher(), None

    mqtt_client = MqttClient(config.mqtt, client_id='pallet_quote')
    mqtt_client.connect()
    publisher = MqttEventPublisher(mqtt_client, config.mqtt.topic_prefix)
    return publisher, mqtt_client


def _format_quote(response: QuoteResponse) -> str:
    lines = [
        f'Quote {response.quote_id} ({response.status})',
        f'  Total: {response.price.amount:.2f} '
        f'{response.price.currency_code}',
    ]
    for charge in response.charges:
        lines.append(
            f'  - {charge.code}: {charge.description} {charge.amount:.2f}'
        )
    if response.notes:
        lines.append(f'  {response.notes}')
    return '\n'.join(lines)


def _run_scan(args: argparse.Namespace, config: AppConfig,
              publisher: EventPublisher) -> int:
    scan_config = config.scan
    if args.strategy:
        scan_config = replace(scan_config, strategy=ScanStrategy(args.strategy))

    publisher.subscribe(
        ScanSnapshotEvent,
        lambda e: logger.debug('Scan: %s', e.snapshot.message),
    )
    publisher.subscribe(
        ScanFailedEvent,
        lambda e: logger.error('Scan failed: %s', e.reason),
    )
    publisher.subscribe(
        MeasurementCompletedEvent,
        lambda e: print(
            f'LENGTH {e.measurement.length:.1f}"  '
            f'WIDTH {e.measurement.width:.1f}"  '
            f'HEIGHT {e.measurement.height:.1f}"'
        ),
    )

    session = ScanSession(create_scanner(scan_config), publisher)
    try:
        session.start(DeviceCapabilities())
    finally:
        publisher.dispatch_pending()

    for record in read_recording(args.recording):
        if isinstance(record, Point3D):
            session.submit_tap(record)
        else:
            session.submit_frame(record)
        session.drain()
        publisher.dispatch_pending()

    snapshot = session.latest_snapshot
    if snapshot.measurement is None:
        print(f'No measurement: {snapshot.message}')
        return 1
    return 0


def _run_quote(args: argparse.Namespace, config: AppConfig,
               publisher: EventPublisher) -> int:
    request = load_quote_request(args.request)

    publisher.subscribe(
        QuoteStateChangedEvent,
        lambda e: logger.info('Quote state: %s', e.state.status),
    )

    gateway = RequestsQuoteGateway(config.quote_api)
    usecase = RequestQuote(gateway, publisher)
    try:
        state = usecase.submit(request).result()
    finally:
        usecase.shutdown()
        gateway.close()
        publisher.dispatch_pending()

    if state.status != QuoteStatus.SUCCEEDED:
        code = f'Status Code: {state.error_code}\n' if state.error_code else ''
        print(f'Error\n{code}{state.error_message}', file=sys.stderr)
        return 1

    print(_format_quote(state.response))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI를 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        프로세스 종료 코드.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        config = YamlConfigLoader(args.config_file).load()
    except DomainError as exc:
        logger.error('Invalid configuration: %s', exc)
        return 2

    mqtt_client = None
    try:
        publisher, mqtt_client = _build_publisher(config)
        if args.command == 'scan':
            return _run_scan(args, config, publisher)
        return _run_quote(args, config, publisher)
    except (DomainError, RecordingFormatError, OSError) as exc:
        logger.error('%s', exc)
        return 1
    finally:
        if mqtt_client is not None:
            mqtt_client.disconnect()


if __name__ == '__main__':
    sys.exit(main())
