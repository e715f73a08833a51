import inspect
import logging


def get_root_from_chunk(instance):
    return get_instance_from_chunk(instance, condition=lambda x: x.father is None)


def get_instance_from_chunk(instance, condition):
    while not condition(instance):
        instance = instance.father

    return instance


class Dependency:
    '''This makes the relation between fields possible.

    It's used where a field needs a value (a length, a number of elements)
    that is only known once other fields have been unpacked, like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(n=Dependency('.length'))

    The syntax of the expression is inspired from module resolution:

     - '.' as first char indicates we refer to a field at the same level,
       i.e. the resolution starts from the father of the field
     - otherwise the resolution starts from the root chunk

    Each component of the path is looked up with getattr(); if the last one
    is a method it's called, otherwise its value is used. Since the fields
    are unpacked in order, an expression can refer only to fields that
    precede the one depending on it.
    '''
    def __init__(self, expression):
        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve_field(self, instance):
        self.logger.debug('trying to resolve \'%s\' using class \'%s\'' % (
            self.expression,
            self.__class__.__name__,
        ))

        # '.miao'.split(".") -> ['', 'miao']
        # 'miao'.split(".") -> ['miao']
        fields_path = self.expression.split('.')

        if fields_path[0] == '':
            field = instance.father
            fields_path = fields_path[1:]
            self.logger.debug(' resolve from father: \'%s\'' % field.__class__.__name__)
        else:
            field = get_root_from_chunk(instance)
            self.logger.debug(' resolve from root: \'%s\'' % field.__class__.__name__)

        for component_name in fields_path:
            field = getattr(field, component_name)

        return field

    def resolve(self, instance):
        '''With this method we resolve the attribute with respect to the instance
        passed as argument.'''
        field = self.resolve_field(instance)

        value = field() if inspect.ismethod(field) else field.value

        self.logger.debug(' resolved with value %s' % value)

        return value
