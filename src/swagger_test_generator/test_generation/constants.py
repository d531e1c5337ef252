"""Default Mocha templates and naming constants."""

from __future__ import annotations

DEFAULT_FILE_NAME_TEMPLATE = "{{basePath}}-{{tag.name}}.spec.js"
RESPONSE_DATA_PATH = "response.data"
TEST_HELPER_MODULE = "@infinite-automation/mango-module-tools/test-helper/testHelper"

# File template variables: document, basePath, tag, suite_title, tests.
DEFAULT_FILE_TEMPLATE = """/*
 * Tests for the '{{tag.name}}' operations of {{document.title}} ({{basePath}}).
 * Generated by swagger-test-generator; review example values before use.
 */

const {assert} = require('chai');
const {createClient, login} = require('""" + TEST_HELPER_MODULE + """');
const client = createClient();

describe({{suite_title}}, function() {
    before('Login', function() {
        return login.call(this, client);
    });

{{tests}}
});
"""

# Test template variables: operation, method, test_title, path_params,
# query_params, request_body, request_path, status_code, response_assertions.
# path_params, query_params and request_body carry their own trailing semicolon.
DEFAULT_TEST_TEMPLATE = """    it({{test_title}}, function() {
        const params = {{path_params}}
        const query = {{query_params}}
        const requestBody = {{request_body}}
        return client.restRequest({
            path: {{request_path}},
            method: '{{method}}',
            params: query,
            data: requestBody
        }).then(response => {
            assert.strictEqual(response.status, {{status_code}});
            {{response_assertions}}
        });
    });
"""
