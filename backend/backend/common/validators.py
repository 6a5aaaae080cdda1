#  Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

import re

#Define patterns as global constants
uuid_pattern = r'^[0-9a-fA-F]{8}\b\-[0-9a-fA-F]{4}\b\-[0-9a-fA-F]{4}\b\-[0-9a-fA-F]{4}\b\-[0-9a-fA-F]{12}$'
email_pattern = r'^[\w\-\.\+]+@([\w-]+\.)+[\w-]{2,4}$'
numeric_id_pattern = r'^[0-9]{1,20}$'
https_url_pattern = r'^https?:\/\/[^\s\/$.?#].[^\s]*$'

#Define local regexes that use the patterns
uuid_regex = re.compile(uuid_pattern)
email_regex = re.compile(email_pattern)
numeric_id_regex = re.compile(numeric_id_pattern)
https_url_regex = re.compile(https_url_pattern)


def validate_uuid(name, value):
    if not uuid_regex.fullmatch(value):
        return (False, name + " is invalid. Must follow the regexp "+uuid_pattern)
    return (True, '')

def validate_email(name, value):
    if not email_regex.fullmatch(value):
        return (False, name + " is invalid. Must follow the regexp "+email_pattern)
    return (True, '')

def validate_numeric_id(name, value):
    if not numeric_id_regex.fullmatch(value):
        return (False, name + " is invalid. Must be a numeric identifier.")
    return (True, '')

def validate_url(name, value):
    if not https_url_regex.fullmatch(value):
        return (False, name + " is invalid. Must be an http(s) URL.")
    return (True, '')

def validate_string_max_length(name, value, max_length):
    if len(value) > max_length:
        return (False, name + " must be lower than " + str(max_length) + " characters")
    return (True, '')


VALIDATORS = {
    'UUID': validate_uuid,
    'EMAIL': validate_email,
    'NUMERIC_ID': validate_numeric_id,
    'URL': validate_url,
    'STRING_256': lambda name, value: validate_string_max_length(name, value, 256),
}


def validate(values):
    """Validate a dict of {field: {'value': ..., 'validator': ..., 'optional': bool}}.

    Returns a (valid, message) tuple; the message names the first failing field.
    """
    for k, v in values.items():

        optional = False
        if 'optional' in v:
            if not isinstance(v['optional'], bool):
                raise Exception("The optional field in validator for " + k + " field must be of type bool")
            optional = v['optional']

        #Empty checks. Optional empties are skipped, required ones fail.
        if v['value'] is None or (isinstance(v['value'], str) and v['value'] == ''):
            if optional:
                continue
            return (False, k + " is a required field.")

        if not isinstance(v['value'], str):
            return (False, k + " is invalid. Must be a string, not a " + str(type(v['value'])))

        validator = VALIDATORS.get(v['validator'])
        if validator is None:
            raise Exception("Unknown validator " + str(v['validator']) + " for " + k + " field")

        (valid, message) = validator(k, v['value'])
        if not valid:
            return (valid, message)

    return (True, "")
