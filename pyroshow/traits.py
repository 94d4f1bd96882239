#
# Copyright (C) 2026 Pyroshow Developers — LGPL-3.0-or-later
#

# pylint: disable=protected-access, invalid-name, no-member

import math
import sys

from argparse import ArgumentParser, BooleanOptionalAction

from traitlets import Bool, Container, Enum, HasTraits, List, TraitError, TraitType, \
        Undefined, Unicode, UseEnum

from pyroshow.color import to_color
from pyroshow.log import Log
from pyroshow.types import EffectType


class ColorTrait(TraitType):
    """
    A traitlet which encapsulates a Color and performs
    type coercion as needed.
    """
    info_text = "a color"
    default_value = 'black'

    def validate(self, obj, value):
        color = None
        try:
            if value is not None:
                color = to_color(value)
        except (TypeError, ValueError, KeyError):
            self.error(obj, value)

        # empty strings parse to None as well
        if color is None and not self.allow_none:
            self.error(obj, value)
        return color



class ColorSchemeTrait(List):
    """
    A list of ColorTraits which comprise a scheme
    """
    info_text = 'a list of colors'

    def __init__(self, trait=ColorTrait(), default_value=(),
                 minlen=0, maxlen=sys.maxsize, **kwargs):
        super(ColorSchemeTrait, self).__init__(trait=trait, default_value=default_value,
                                               minlen=minlen, maxlen=maxlen, **kwargs)



class Vec3Trait(TraitType):
    """
    A point or direction in 3D space, coerced to a tuple of three
    finite floats.
    """
    info_text = 'a 3D vector'
    default_value = (0.0, 0.0, 0.0)

    def validate(self, obj, value):
        try:
            vec = tuple(float(x) for x in value)
        except (TypeError, ValueError):
            self.error(obj, value)

        if len(vec) != 3 or not all(math.isfinite(x) for x in vec):
            self.error(obj, value)
        return vec



class WriteOnceMixin(object):
    """
    Mixin for traits which cannot be changed after an initial
    value has been set. Writing the current value again is allowed,
    since HasTraits re-applies constructor arguments.
    """
    write_once = True

    def validate(self, obj, value):
        current = obj._trait_values.get(self.name, self.default_value)
        if current == self.default_value or current == value:
            return super().validate(obj, value)

        raise TraitError("The '%s' trait of %s instance may only be written once, "
                         "it is already %r" % (self.name, type(obj).__name__, current))


class WriteOnceUnicode(WriteOnceMixin, Unicode):
    """
    Subclass of Unicode which may only be written once
    """
    pass


class UseEnumCaseless(UseEnum):
    """
    Subclass of UseEnum which allows selection of values using
    case insensitive strings
    """

    def select_by_name(self, value, default=Undefined):
        if value.startswith(self.name_prefix):
            # -- SUPPORT SCOPED-NAMES, like: "Color.red" => "red"
            value = value.replace(self.name_prefix, "", 1)

        for name, member in self.enum_class.__members__.items():
            if name.lower() == value.lower() or str(member.value).lower() == value.lower():
                return member
        return default


class EffectTypeTrait(UseEnumCaseless):
    """
    An EffectType, selectable by name or alias. Unknown names fall
    back to a burst instead of failing, so hand-written shows with
    typos still play.
    """
    info_text = 'an effect type'

    def __init__(self, default_value=EffectType.BURST, **kwargs):
        super(EffectTypeTrait, self).__init__(EffectType, default_value=default_value, **kwargs)

    def validate(self, obj, value):
        if isinstance(value, str):
            effect_type = EffectType.lookup(value)
            if effect_type is None:
                Log.get('pyroshow.instance').warning(
                    "Unknown effect type '%s', falling back to %s",
                    value, EffectType.BURST.value)
                return EffectType.BURST
            return effect_type

        return super().validate(obj, value)


def is_trait_writable(trait: TraitType) -> bool:
    """
    Test if a trait is writable

    :param trait: the trait to be tested
    :return: True if the trait is writable
    """
    if trait.read_only:
        return False

    if hasattr(trait, 'write_once') and trait.write_once:
        return False

    return True


def get_args_dict(obj: HasTraits, incl_all=False) -> dict:
    """
    Return a dict of user-configurable traits for an object

    :param obj: an instance of HasTraits
    :param incl_all: If all items should be included, regardless of RO status
    :return: dict of arguments
    """
    argsdict = {}
    for k, trait in sorted(obj.traits().items()):
        if incl_all or (trait.get_metadata('config') is True and is_trait_writable(trait)):
            argsdict[k] = getattr(obj, k)
    return argsdict


def add_traits_to_argparse(obj: HasTraits, parser: ArgumentParser,
                           prefix: str=None):
    """
    Add all configurable traits from the given object (or class) to
    the argparse context.

    :param obj: an instance or subclass of HasTraits
    :param parser: argparse parser
    :param prefix: string to prefix keys with
    """
    traits = obj.class_traits() if isinstance(obj, type) else obj.traits()
    for key, trait in sorted(traits.items()):
        if trait.get_metadata('config') is not True:
            continue

        argname = '--%s' % key.replace('_', '-')
        if prefix is not None:
            argname = '--%s.%s' % (prefix, key.replace('_', '-'))

        if isinstance(trait, Container):
            parser.add_argument(argname, dest=key, nargs='+', help=trait.info())
        elif isinstance(trait, Bool):
            parser.add_argument(argname, dest=key, action=BooleanOptionalAction,
                                default=None, help=trait.info())
        elif isinstance(trait, Enum):
            parser.add_argument(argname, dest=key, type=str.lower,
                                choices=[x.lower() for x in trait.values],
                                help=trait.info())
        else:
            argtype = str
            default_value = trait.default_value
            if isinstance(default_value, (int, float)) and not isinstance(default_value, bool):
                argtype = type(default_value)
            parser.add_argument(argname, dest=key, type=argtype, help=trait.info())


def apply_from_argparse(args, target: HasTraits) -> dict:
    """
    Applies arguments added via add_traits_to_argparse to
    a target object which implements HasTraits.
    Will throw TraitError if validation fails.

    :param args: Parsed args from argparse
    :param target: Target object
    :return: Dict of the arguments which actually changed
    """
    argkeys = [k for k, v in vars(args).items() if v is not None]
    intersect = sorted(set(target.traits().keys()).intersection(set(argkeys)))

    changed = {}
    for key in intersect:
        if target.traits()[key].get_metadata('config') is not True:
            raise ValueError("Trait is not marked as configurable: %s" % key)

        setattr(target, key, getattr(args, key))
        changed[key] = getattr(target, key)

    return changed
