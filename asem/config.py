class SchemaError(Exception):
  pass


class ParseError(Exception):
  def __init__(self, message):
    super().__init__(message)
    self.ok_message = message
    self.sections = []

  def __str__(self):
    if self.sections:
      return 'While validating section "{}": {}'.format(
          ".".join(self.sections), self.ok_message)
    return self.ok_message


class Type(object):
  @classmethod
  def _validate(cls, structure):
    raise NotImplementedError


class Section(Type):
  @classmethod
  def _validate(cls, structure):
    if structure is None:
      structure = {}

    if not isinstance(structure, dict):
      raise ParseError("Expected section, but got {}: {}.".format(
          structure.__class__.__name__, structure))

    for field, subschema in cls.__dict__.items():
      if field.startswith("_"):
        continue

      try:
        substructure = structure[field]
      except KeyError:
        if isinstance(subschema, optional):
          substructure = subschema.default
          if isinstance(subschema.type, type) and \
              issubclass(subschema.type, Section):
            substructure = subschema.type._validate(substructure)
        else:
          raise ParseError('Required field "{}" not found.'.format(field))
      else:
        if isinstance(subschema, optional):
          subschema = subschema.type
        try:
          substructure = validate(substructure, subschema)
        except ParseError as e:
          e.sections.insert(0, field)
          raise

      structure[field] = substructure

    fields = {k for k in cls.__dict__ if not k.startswith("_")}
    unknown = set(structure) - fields
    if unknown:
      raise ParseError("Unknown fields: {}.".format(
          ", ".join(sorted(str(k) for k in unknown))))

    return structure


class constrained(Type):
  def __init__(self, type, constraint):
    self.type = type
    self.constraint = constraint

  def _validate(self, structure):
    structure = validate(structure, self.type)
    ok, message = self.constraint(structure)
    if not ok:
      raise ParseError("Constraint failure: {}: {}.".format(message, structure))
    return structure


class optional(object):
  def __init__(self, type, default=None):
    self.type = type
    self.default = default


def any(type, values):
  def check_any(structure):
    if structure in values:
      return (True, None)
    return (False, "must be any of {}".format(
        ", ".join(repr(x) for x in values)))

  return constrained(type, check_any)


def non_negative(type):
  return constrained(type, lambda x: (x >= 0, "must not be negative"))


def validate(structure, schema):
  if isinstance(schema, Type) or \
      (isinstance(schema, type) and issubclass(schema, Type)):
    return schema._validate(structure)

  # bool is a subclass of int, so it has to be checked both ways
  if schema is bool:
    if not isinstance(structure, bool):
      raise ParseError("Expected bool, but got {}: {}.".format(
          structure.__class__.__name__, structure))
  elif schema is int:
    if not isinstance(structure, int) or isinstance(structure, bool):
      raise ParseError("Expected integer, but got {}: {}.".format(
          structure.__class__.__name__, structure))
  elif schema is str:
    if not isinstance(structure, str):
      raise ParseError("Expected string, but got {}: {}.".format(
          structure.__class__.__name__, structure))
  else:
    raise SchemaError("Unknown validation type in schema: {}".format(schema))

  return structure

