"""
Default validator key material used by the canonical scenarios.

The table is read-only; scenario builders take it as an argument so a test
can pass its own keys without touching shared state.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..chain.types import ValidatorID


@dataclass(frozen=True)
class ValidatorConfig:
    """Addresses and keys of one validator on the provider and consumer chains."""
    ip_suffix: str
    # provider consensus address
    valcons_address: str
    # ed25519 consumer key, as accepted by assign-consensus-key
    consumer_val_pub_key: str
    consumer_valcons_address: str
    # consumer consensus address, bech32-encoded with the provider prefix
    consumer_valcons_address_on_provider: str
    use_consumer_key: bool = False


ValidatorConfigs = Mapping[ValidatorID, ValidatorConfig]


DEFAULT_VALIDATORS: ValidatorConfigs = MappingProxyType({
    ValidatorID("alice"): ValidatorConfig(
        ip_suffix="4",
        valcons_address="cosmosvalcons1qmq08eruchr5sf5s3rwz7djpr5a25f7xw4mceq",
        consumer_val_pub_key='{"@type":"/cosmos.crypto.ed25519.PubKey","key":"RrclQz9bIhkIy/gfL485g3PYMeiIku4qeo495787X10="}',
        consumer_valcons_address="consumervalcons1uuec3cjxajv5te08p220usrjhkfhg9wyvqn0tm",
        consumer_valcons_address_on_provider="cosmosvalcons1uuec3cjxajv5te08p220usrjhkfhg9wyvqn0tm",
    ),
    ValidatorID("bob"): ValidatorConfig(
        ip_suffix="5",
        valcons_address="cosmosvalcons1nx7n5uh0ztxsynn4sje6eyq2ud6rc6klc96w39",
        consumer_val_pub_key='{"@type":"/cosmos.crypto.ed25519.PubKey","key":"QlG+iYe6AyYpvY1z9RNJKCVlH14Q/qSz4EjGdGCru3o="}',
        consumer_valcons_address="consumervalcons1kswr5sq599365kcjmhgufevfps9njf43e4lwdk",
        consumer_valcons_address_on_provider="cosmosvalcons1kswr5sq599365kcjmhgufevfps9njf43e4lwdk",
    ),
    ValidatorID("carol"): ValidatorConfig(
        ip_suffix="6",
        valcons_address="cosmosvalcons1ezyrq65s3gshhx5585w6mpusq3xsj3ayzf4uv6",
        consumer_val_pub_key='{"@type":"/cosmos.crypto.ed25519.PubKey","key":"Ui5Gf1+mtWUdH8u3xlmzdKID+F3PK0sfXZ73GZ6q6is="}',
        consumer_valcons_address="consumervalcons1dxlyn4ngjmf7ymxhm5qdd5p5a4pwdjypah6hxy",
        consumer_valcons_address_on_provider="cosmosvalcons1dxlyn4ngjmf7ymxhm5qdd5p5a4pwdjypah6hxy",
        use_consumer_key=True,
    ),
})
