# cpulink

`cpulink` is the CPU side of a small simulated operating system. It reads
its settings from a configuration file, connects to the memory module and
to the kernel's dispatch and interrupt ports, and then relays lines typed
at the console to them over a simple framed TCP message protocol.

## Installation

```
pip install .
```

## Configuration

By default the CPU reads `cpu.config` in the working directory. The file
holds `KEY=VALUE` lines; blank lines and lines starting with `#` are
ignored, and a line without `=` or without a key raises
`cpulink.config.ConfigError`.

```
IP_MEMORIA=127.0.0.1
PUERTO_MEMORIA=8002
IP_KERNEL=127.0.0.1
PUERTO_KERNEL=8003
PUERTO_KERNEL_DISPATCH=8001
PUERTO_KERNEL_INTERRUPT=8004
```

## Running

```
cpulink [--config PATH] [--log PATH]
```

- `--config`: configuration file (default `cpu.config`).
- `--log`: log file, appended to (default `cpu.log`). Log lines are also
  written to standard output.

The program first connects to memory, then waits for Enter, then connects
to the kernel's dispatch and interrupt ports. If any connection fails it
logs the error, closes what was opened and exits with status 1.

It then prompts in rounds:

```
[CPU DISPATCH] ->
[CPU INTERRUPT] ->
```

A non-empty dispatch line is sent to memory and to the dispatch port; a
non-empty interrupt line is sent to memory and to the interrupt port. A
round in which both lines are empty ends the session, as does end of
input. Every connection and the logger are closed on exit.

## Wire format

Every frame is a native-endian 32-bit operation code, a 32-bit payload
size, and the payload:

- `OpCode.MESSAGE` (0): the payload is a UTF-8, NUL-terminated string.
- `OpCode.PACKAGE` (1): the payload is a sequence of values, each preceded
  by its 32-bit length.

## Library use

```python
from cpulink.packets import Packet, encode_message, decode_values

frame = encode_message("hello")

packet = Packet()
packet.add(b"one")
packet.add(b"two")
data = packet.serialize()

values = decode_values(bytes(packet.payload))  # [b"one", b"two"]
```

- `cpulink.packets`: `send_message`, `send_packet`, `receive_operation`,
  `receive_buffer`, `receive_message` and `receive_packet` work on
  sockets directly; a closed peer raises `ConnectionClosed`.
- `cpulink.connections`: `create_connection`, `start_server`,
  `listen_server`, `wait_client` and `destroy_connection`; setup failures
  raise `ConnectionSetupError`.
- `cpulink.config`: `load_config` and `parse_config` return a `Config`
  with `get_string`, `get_int` and `has_property`.
- `cpulink.clients`: `connect_endpoint` with an `Endpoint`, or the
  shortcuts `connect_memory`, `connect_dispatch`, `connect_interrupt` and
  `connect_kernel`.
- `cpulink.cli`: `run_console` runs the relay loop over any three sockets
  and a line-reading function, and returns the number of lines sent.
- `cpulink.logger`: `start_logger`, `close_logger` and `log_custom_error`.

## What it does not do

`cpulink` is only the CPU client. It does not include the memory or
kernel modules it talks to; those must be running elsewhere. It does not
interpret the lines it sends, and it does not read replies from memory or
the kernel.

## Tests

```
pip install .[test]
pytest
```