from pathlib import Path

files_directory = Path(__file__).parent / 'files'
xml_directory = files_directory / 'XML'

BOUNCING_BALL_XML = xml_directory / 'CS2.0' / 'bouncingBall' / 'modelDescription.xml'
ATTRIBUTES_XML = xml_directory / 'ME2.0' / 'modelDescriptionAttributes' / 'modelDescription.xml'

def model_description_xml(body = '', **attributes):
    """
        Build a minimal fmiModelDescription document around 'body'.
        Keyword arguments override the root attributes, an attribute
        given as None is left out.
    """
    root_attributes = {'fmiVersion': '2.0', 'modelName': 'myModelName', 'guid': 'myGuid'}
    root_attributes.update(attributes)
    attrs = ' '.join('%s="%s"' % (k, v) for k, v in root_attributes.items() if v is not None)
    return ('<?xml version="1.0" encoding="UTF-8"?>\n'
            '<fmiModelDescription %s>%s</fmiModelDescription>' % (attrs, body))

def scalar_variable_xml(payload = '<Real/>', **attributes):
    """ Build a ModelVariables element holding a single ScalarVariable. """
    sv_attributes = {'name': 'x', 'valueReference': '0'}
    sv_attributes.update(attributes)
    attrs = ' '.join('%s="%s"' % (k, v) for k, v in sv_attributes.items() if v is not None)
    return '<ModelVariables><ScalarVariable %s>%s</ScalarVariable></ModelVariables>' % (attrs, payload)
