"""Test suite for the checkout system.

Organized into four categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Demonstrates stubs, mocks and dummies against the ports

2. adapters/: Integration tests for adapter implementations
   - Tests against a mock HTTP transport, a temporary SQLite file,
     stdout and a temporary outbox directory

3. fakes/: Port implementations for testing
   - In-memory PaymentGatewayPort, OrderRepositoryPort and NotifierPort

4. builders/: Test data creation
   - Object Mother for users, Data Builder for carts
"""
