"""BLOGLIST test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every store implementation must share (memory and SQLite).
- integration/  : Real database, migrations and composition root.
- functional/   : User-visible flows run through the message bus and the db CLI.
- e2e/          : The `bloglist` CLI driven by CliRunner against a migrated SQLite file.
- fixtures/     : Pytest plugins (engines, wired applications).
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes (FakeClock, in-memory stores) over mocks.
- Contract tests take the parametrized ``uow`` fixture so each runs once per backend.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, integration, functional, e2e, property, slow
"""
