"""Central catalog definitions: applications -> modules -> actions, plus preset roles.
Permission strings are "<module>.<action>" or "<module>.*" and are scoped to one application.
Extend cautiously; never rename module/action ids silently since stored roles reference them by string.
"""
from __future__ import annotations
from typing import Any, Dict, List

# Each action is (id, name, description)
APPLICATIONS: List[Dict[str, Any]] = [
    {
        'id': 'sales',
        'name': 'Sales',
        'description': 'Manage customers, leads, quotations and orders',
        'color': '#2196F3',
        'icon': 'sales',
        'is_enabled': True,
        'modules': [
            {'id': 'customers', 'name': 'Customers', 'description': 'Customer management', 'actions': [
                ('view', 'View', 'View customer details and list'),
                ('create', 'Create', 'Add new customers'),
                ('edit', 'Edit', 'Modify customer information'),
                ('delete', 'Delete', 'Remove customers'),
                ('export', 'Export', 'Export customer data'),
            ]},
            {'id': 'leads', 'name': 'Leads', 'description': 'Lead and prospect management', 'actions': [
                ('view', 'View', 'View leads'),
                ('create', 'Create', 'Add new leads'),
                ('edit', 'Edit', 'Update lead information'),
                ('delete', 'Delete', 'Remove leads'),
                ('convert', 'Convert', 'Convert lead to customer'),
                ('assign', 'Assign', 'Assign leads to sales reps'),
            ]},
            {'id': 'quotations', 'name': 'Quotations', 'description': 'Sales quotation management', 'actions': [
                ('view', 'View', 'View quotations'),
                ('create', 'Create', 'Create new quotations'),
                ('edit', 'Edit', 'Modify quotations'),
                ('delete', 'Delete', 'Remove quotations'),
                ('send', 'Send', 'Send quotations to customers'),
                ('approve', 'Approve', 'Approve quotations'),
                ('convert', 'Convert', 'Convert to sales order'),
            ]},
            {'id': 'orders', 'name': 'Orders', 'description': 'Sales order management', 'actions': [
                ('view', 'View', 'View sales orders'),
                ('create', 'Create', 'Create new orders'),
                ('edit', 'Edit', 'Modify orders'),
                ('delete', 'Delete', 'Cancel orders'),
                ('approve', 'Approve', 'Approve sales orders'),
                ('fulfill', 'Fulfill', 'Mark orders as fulfilled'),
            ]},
            {'id': 'products', 'name': 'Products', 'description': 'Product catalog management', 'actions': [
                ('view', 'View', 'View products'),
                ('create', 'Create', 'Add new products'),
                ('edit', 'Edit', 'Modify product details'),
                ('delete', 'Delete', 'Remove products'),
                ('manage_pricing', 'Manage Pricing', 'Set product prices'),
                ('manage_inventory', 'Manage Inventory', 'Update stock levels'),
            ]},
            {'id': 'reports', 'name': 'Reports', 'description': 'Sales reports and analytics', 'actions': [
                ('view', 'View', 'View sales reports'),
                ('export', 'Export', 'Export reports'),
            ]},
        ],
    },
    {
        'id': 'accounting',
        'name': 'Accounting',
        'description': 'Double-entry bookkeeping and financial reports',
        'color': '#4CAF50',
        'icon': 'accounting',
        'is_enabled': True,
        'modules': [
            {'id': 'chart_of_accounts', 'name': 'Chart of Accounts', 'description': 'Manage account structure', 'actions': [
                ('view', 'View', 'View chart of accounts'),
                ('create', 'Create', 'Add new accounts'),
                ('edit', 'Edit', 'Modify accounts'),
                ('delete', 'Delete', 'Remove accounts'),
            ]},
            {'id': 'journal_entries', 'name': 'Journal Entries', 'description': 'Record financial transactions', 'actions': [
                ('view', 'View', 'View journal entries'),
                ('create', 'Create', 'Create journal entries'),
                ('edit', 'Edit', 'Modify draft entries'),
                ('delete', 'Delete', 'Delete draft entries'),
                ('post', 'Post', 'Post entries to ledger'),
                ('reverse', 'Reverse', 'Reverse posted entries'),
                ('approve', 'Approve', 'Approve entries for posting'),
            ]},
            {'id': 'reports', 'name': 'Financial Reports', 'description': 'View financial statements', 'actions': [
                ('view', 'View', 'View financial reports'),
                ('export', 'Export', 'Export reports to PDF/Excel'),
                ('generate', 'Generate', 'Generate custom reports'),
            ]},
            {'id': 'bank', 'name': 'Bank Management', 'description': 'Bank account and reconciliation', 'actions': [
                ('view', 'View', 'View bank accounts'),
                ('reconcile', 'Reconcile', 'Perform bank reconciliation'),
                ('import', 'Import', 'Import bank statements'),
            ]},
            {'id': 'fiscal_periods', 'name': 'Fiscal Periods', 'description': 'Manage accounting periods', 'actions': [
                ('view', 'View', 'View fiscal periods'),
                ('open', 'Open', 'Open new periods'),
                ('close', 'Close', 'Close periods'),
                ('reopen', 'Reopen', 'Reopen closed periods'),
            ]},
        ],
    },
    {
        'id': 'hr',
        'name': 'HR',
        'description': 'Complete employee management and payroll',
        'color': '#E91E63',
        'icon': 'hr',
        'is_enabled': True,
        'modules': [
            {'id': 'employees', 'name': 'Employees', 'description': 'Employee records and profiles', 'actions': [
                ('view', 'View', 'View employee profiles'),
                ('view_own', 'View Own', 'View own profile only'),
                ('create', 'Create', 'Add new employees'),
                ('edit', 'Edit', 'Update employee information'),
                ('edit_own', 'Edit Own', 'Update own profile'),
                ('delete', 'Delete', 'Remove employees'),
                ('export', 'Export', 'Export employee data'),
            ]},
            {'id': 'leave', 'name': 'Leave Management', 'description': 'Leave requests and approvals', 'actions': [
                ('view', 'View', 'View all leave requests'),
                ('view_own', 'View Own', 'View own leave requests'),
                ('view_team', 'View Team', 'View team leave requests'),
                ('request', 'Request', 'Submit leave requests'),
                ('approve', 'Approve', 'Approve leave requests'),
                ('reject', 'Reject', 'Reject leave requests'),
                ('cancel', 'Cancel', 'Cancel leave requests'),
                ('configure', 'Configure', 'Configure leave types and policies'),
            ]},
            {'id': 'payroll', 'name': 'Payroll', 'description': 'Salary and payments', 'actions': [
                ('view', 'View', 'View payroll records'),
                ('view_own', 'View Own', 'View own payslips'),
                ('run', 'Run', 'Run payroll'),
                ('approve', 'Approve', 'Approve payroll for processing'),
                ('export', 'Export', 'Export payroll reports'),
                ('configure', 'Configure', 'Configure salary structures'),
            ]},
            {'id': 'attendance', 'name': 'Attendance', 'description': 'Time tracking and attendance', 'actions': [
                ('view', 'View', 'View all attendance records'),
                ('view_own', 'View Own', 'View own attendance'),
                ('view_team', 'View Team', 'View team attendance'),
                ('clock_in', 'Clock In', 'Record clock in'),
                ('clock_out', 'Clock Out', 'Record clock out'),
                ('edit', 'Edit', 'Modify attendance records'),
                ('approve', 'Approve', 'Approve attendance corrections'),
                ('export', 'Export', 'Export attendance reports'),
            ]},
            {'id': 'departments', 'name': 'Departments', 'description': 'Organizational structure', 'actions': [
                ('view', 'View', 'View departments'),
                ('create', 'Create', 'Create departments'),
                ('edit', 'Edit', 'Modify departments'),
                ('delete', 'Delete', 'Remove departments'),
            ]},
        ],
    },
    {
        'id': 'production',
        'name': 'Production',
        'description': 'Manufacturing orders and quality control',
        'color': '#607D8B',
        'icon': 'production',
        'is_enabled': True,
        'modules': [
            {'id': 'work_orders', 'name': 'Work Orders', 'description': 'Production work orders', 'actions': [
                ('view', 'View', 'View work orders'),
                ('create', 'Create', 'Create work orders'),
                ('edit', 'Edit', 'Modify work orders'),
                ('delete', 'Delete', 'Delete work orders'),
                ('start', 'Start', 'Start production'),
                ('pause', 'Pause', 'Pause production'),
                ('complete', 'Complete', 'Mark as complete'),
                ('cancel', 'Cancel', 'Cancel work orders'),
            ]},
            {'id': 'manufacturing', 'name': 'Manufacturing', 'description': 'Manufacturing operations', 'actions': [
                ('view', 'View', 'View manufacturing status'),
                ('record_output', 'Record Output', 'Record production output'),
                ('record_waste', 'Record Waste', 'Record material waste'),
                ('assign_workers', 'Assign Workers', 'Assign workers to operations'),
            ]},
            {'id': 'quality', 'name': 'Quality Control', 'description': 'Quality inspections', 'actions': [
                ('view', 'View', 'View quality inspections'),
                ('create', 'Create', 'Create inspection records'),
                ('pass', 'Pass', 'Mark inspection as passed'),
                ('fail', 'Fail', 'Mark inspection as failed'),
                ('request_rework', 'Request Rework', 'Request product rework'),
            ]},
            {'id': 'bom', 'name': 'Bill of Materials', 'description': 'Product BOMs', 'actions': [
                ('view', 'View', 'View BOMs'),
                ('create', 'Create', 'Create BOMs'),
                ('edit', 'Edit', 'Modify BOMs'),
                ('delete', 'Delete', 'Delete BOMs'),
            ]},
        ],
    },
    {
        'id': 'invoice',
        'name': 'Invoice',
        'description': 'Create and send professional invoices',
        'color': '#3F51B5',
        'icon': 'invoice',
        'is_enabled': True,
        'modules': [
            {'id': 'invoices', 'name': 'Invoices', 'description': 'Invoice management', 'actions': [
                ('view', 'View', 'View invoices'),
                ('create', 'Create', 'Create invoices'),
                ('edit', 'Edit', 'Modify draft invoices'),
                ('delete', 'Delete', 'Delete invoices'),
                ('send', 'Send', 'Send invoices to customers'),
                ('void', 'Void', 'Void issued invoices'),
                ('record_payment', 'Record Payment', 'Record payments received'),
            ]},
            {'id': 'recurring', 'name': 'Recurring Invoices', 'description': 'Automated recurring invoices', 'actions': [
                ('view', 'View', 'View recurring templates'),
                ('create', 'Create', 'Create recurring invoices'),
                ('edit', 'Edit', 'Modify recurring settings'),
                ('pause', 'Pause', 'Pause recurring invoices'),
                ('delete', 'Delete', 'Delete recurring templates'),
            ]},
            {'id': 'templates', 'name': 'Templates', 'description': 'Invoice templates', 'actions': [
                ('view', 'View', 'View templates'),
                ('create', 'Create', 'Create templates'),
                ('edit', 'Edit', 'Modify templates'),
                ('delete', 'Delete', 'Delete templates'),
                ('set_default', 'Set Default', 'Set default template'),
            ]},
        ],
    },
    {
        'id': 'bank',
        'name': 'Bank',
        'description': 'Bank account management and reconciliation',
        'color': '#00BCD4',
        'icon': 'bank',
        'is_enabled': True,
        'modules': [
            {'id': 'accounts', 'name': 'Bank Accounts', 'description': 'Bank account management', 'actions': [
                ('view', 'View', 'View bank accounts'),
                ('create', 'Create', 'Add bank accounts'),
                ('edit', 'Edit', 'Modify account details'),
                ('delete', 'Delete', 'Remove accounts'),
                ('view_balance', 'View Balance', 'View account balances'),
            ]},
            {'id': 'transactions', 'name': 'Transactions', 'description': 'Bank transactions', 'actions': [
                ('view', 'View', 'View transactions'),
                ('create', 'Create', 'Record transactions'),
                ('edit', 'Edit', 'Modify transactions'),
                ('delete', 'Delete', 'Delete transactions'),
                ('import', 'Import', 'Import bank statements'),
                ('categorize', 'Categorize', 'Categorize transactions'),
            ]},
            {'id': 'reconciliation', 'name': 'Reconciliation', 'description': 'Bank reconciliation', 'actions': [
                ('view', 'View', 'View reconciliation status'),
                ('perform', 'Perform', 'Perform reconciliation'),
                ('approve', 'Approve', 'Approve reconciliation'),
                ('undo', 'Undo', 'Undo reconciliation'),
            ]},
            {'id': 'transfers', 'name': 'Transfers', 'description': 'Inter-account transfers', 'actions': [
                ('view', 'View', 'View transfers'),
                ('create', 'Create', 'Create transfers'),
                ('approve', 'Approve', 'Approve transfers'),
            ]},
        ],
    },
    {
        'id': 'fixed-assets',
        'name': 'Fixed Assets',
        'description': 'Track company assets and depreciation',
        'color': '#009688',
        'icon': 'fixed-assets',
        'is_enabled': True,
        'modules': [
            {'id': 'register', 'name': 'Asset Register', 'description': 'Asset registry', 'actions': [
                ('view', 'View', 'View assets'),
                ('create', 'Create', 'Add new assets'),
                ('edit', 'Edit', 'Modify asset details'),
                ('delete', 'Delete', 'Remove assets'),
                ('transfer', 'Transfer', 'Transfer asset location/department'),
                ('assign', 'Assign', 'Assign assets to users'),
            ]},
            {'id': 'categories', 'name': 'Asset Categories', 'description': 'Asset categorization', 'actions': [
                ('view', 'View', 'View categories'),
                ('create', 'Create', 'Create categories'),
                ('edit', 'Edit', 'Modify categories'),
                ('delete', 'Delete', 'Delete categories'),
            ]},
            {'id': 'depreciation', 'name': 'Depreciation', 'description': 'Asset depreciation', 'actions': [
                ('view', 'View', 'View depreciation schedules'),
                ('calculate', 'Calculate', 'Run depreciation calculation'),
                ('post', 'Post', 'Post depreciation to accounting'),
                ('configure', 'Configure', 'Configure depreciation methods'),
            ]},
            {'id': 'disposal', 'name': 'Disposal', 'description': 'Asset disposal', 'actions': [
                ('view', 'View', 'View disposal records'),
                ('request', 'Request', 'Request asset disposal'),
                ('approve', 'Approve', 'Approve disposal requests'),
                ('execute', 'Execute', 'Execute disposal'),
            ]},
        ],
    },
    {
        'id': 'corporate-cards',
        'name': 'Corporate Cards',
        'description': 'Issue and manage company expense cards',
        'color': '#FFC107',
        'icon': 'corporate-cards',
        'is_enabled': False,
        'modules': [
            {'id': 'cards', 'name': 'Cards', 'description': 'Card management', 'actions': [
                ('view', 'View', 'View cards'),
                ('view_own', 'View Own', 'View own card'),
                ('issue', 'Issue', 'Issue new cards'),
                ('block', 'Block', 'Block/freeze cards'),
                ('unblock', 'Unblock', 'Unblock cards'),
                ('cancel', 'Cancel', 'Cancel cards'),
            ]},
            {'id': 'transactions', 'name': 'Transactions', 'description': 'Card transactions', 'actions': [
                ('view', 'View', 'View all transactions'),
                ('view_own', 'View Own', 'View own transactions'),
                ('export', 'Export', 'Export transactions'),
                ('categorize', 'Categorize', 'Categorize transactions'),
                ('flag', 'Flag', 'Flag suspicious transactions'),
            ]},
            {'id': 'limits', 'name': 'Spending Limits', 'description': 'Card spending limits', 'actions': [
                ('view', 'View', 'View limits'),
                ('set', 'Set', 'Set spending limits'),
                ('request_increase', 'Request Increase', 'Request limit increase'),
                ('approve_increase', 'Approve Increase', 'Approve limit increase'),
            ]},
            {'id': 'reports', 'name': 'Reports', 'description': 'Expense reports', 'actions': [
                ('view', 'View', 'View expense reports'),
                ('generate', 'Generate', 'Generate reports'),
                ('export', 'Export', 'Export reports'),
            ]},
        ],
    },
    {
        'id': 'nrs-einvoice',
        'name': 'NRS E-Invoice',
        'description': 'Nigerian tax compliance and e-invoicing',
        'color': '#F44336',
        'icon': 'nrs-einvoice',
        'is_enabled': False,
        'modules': [
            {'id': 'invoices', 'name': 'E-Invoices', 'description': 'Electronic invoices', 'actions': [
                ('view', 'View', 'View e-invoices'),
                ('create', 'Create', 'Create e-invoices'),
                ('submit', 'Submit', 'Submit to NRS'),
                ('cancel', 'Cancel', 'Cancel submissions'),
                ('resubmit', 'Resubmit', 'Resubmit failed invoices'),
            ]},
            {'id': 'compliance', 'name': 'Compliance', 'description': 'Tax compliance', 'actions': [
                ('view', 'View', 'View compliance status'),
                ('generate_reports', 'Generate Reports', 'Generate compliance reports'),
                ('file_returns', 'File Returns', 'File tax returns'),
                ('view_audit', 'View Audit', 'View audit trail'),
            ]},
            {'id': 'certificates', 'name': 'Certificates', 'description': 'Digital certificates', 'actions': [
                ('view', 'View', 'View certificates'),
                ('upload', 'Upload', 'Upload certificates'),
                ('renew', 'Renew', 'Renew certificates'),
                ('revoke', 'Revoke', 'Revoke certificates'),
            ]},
        ],
    },
]


def _role(role_id: str, name: str, description: str, permissions: List[str], is_system: bool = True) -> Dict[str, Any]:
    return {'id': role_id, 'name': name, 'description': description, 'is_system': is_system, 'permissions': permissions}


# Application id -> preset roles seeded at startup
ROLE_PRESETS: Dict[str, List[Dict[str, Any]]] = {
    'sales': [
        _role('sales-admin', 'Sales Admin', 'Full access to all sales features',
              ['customers.*', 'leads.*', 'quotations.*', 'orders.*', 'products.*', 'reports.*']),
        _role('sales-manager', 'Sales Manager', 'Manage orders and customers', [
            'customers.view', 'customers.create', 'customers.edit', 'leads.*', 'quotations.*',
            'orders.view', 'orders.create', 'orders.edit', 'orders.approve', 'products.view', 'reports.view',
        ]),
        _role('sales-rep', 'Sales Rep', 'Handle leads and quotations', [
            'customers.view', 'customers.create', 'leads.view', 'leads.create', 'leads.edit',
            'quotations.view', 'quotations.create', 'quotations.edit', 'quotations.send', 'orders.view', 'products.view',
        ]),
        _role('sales-viewer', 'Sales Viewer', 'View-only access', [
            'customers.view', 'leads.view', 'quotations.view', 'orders.view', 'products.view', 'reports.view',
        ]),
    ],
    'accounting': [
        _role('acc-admin', 'Accounting Admin', 'Full access to accounting',
              ['chart_of_accounts.*', 'journal_entries.*', 'reports.*', 'bank.*', 'fiscal_periods.*']),
        _role('senior-accountant', 'Senior Accountant', 'Post and approve entries', [
            'chart_of_accounts.view', 'journal_entries.*', 'reports.*', 'bank.view', 'bank.reconcile', 'fiscal_periods.view',
        ]),
        _role('accountant', 'Accountant', 'Create and manage entries', [
            'chart_of_accounts.view', 'journal_entries.view', 'journal_entries.create', 'journal_entries.edit',
            'reports.view', 'bank.view',
        ]),
        _role('acc-viewer', 'Accounting Viewer', 'View reports only', [
            'chart_of_accounts.view', 'journal_entries.view', 'reports.view', 'bank.view', 'fiscal_periods.view',
        ]),
    ],
    'hr': [
        _role('hr-admin', 'HR Admin', 'Full access to HR module',
              ['employees.*', 'leave.*', 'payroll.*', 'attendance.*', 'departments.*']),
        _role('hr-manager', 'HR Manager', 'Manage employees and leave', [
            'employees.view', 'employees.create', 'employees.edit', 'leave.view', 'leave.view_team', 'leave.approve',
            'leave.reject', 'payroll.view', 'attendance.view', 'attendance.view_team', 'attendance.approve',
            'departments.view',
        ]),
        _role('team-lead', 'Team Lead', 'Manage team attendance and leave', [
            'employees.view', 'leave.view_own', 'leave.view_team', 'leave.request', 'leave.approve',
            'attendance.view_own', 'attendance.view_team', 'attendance.clock_in', 'attendance.clock_out',
        ]),
        _role('employee', 'Employee', 'Self-service access', [
            'employees.view_own', 'employees.edit_own', 'leave.view_own', 'leave.request', 'leave.cancel',
            'payroll.view_own', 'attendance.view_own', 'attendance.clock_in', 'attendance.clock_out',
        ]),
        _role('hr-viewer', 'HR Viewer', 'View employee information', [
            'employees.view', 'leave.view', 'payroll.view', 'attendance.view', 'departments.view',
        ]),
    ],
    'production': [
        _role('prod-admin', 'Production Admin', 'Full access to production',
              ['work_orders.*', 'manufacturing.*', 'quality.*', 'bom.*']),
        _role('prod-manager', 'Production Manager', 'Manage manufacturing orders', [
            'work_orders.*', 'manufacturing.view', 'manufacturing.assign_workers', 'quality.view', 'bom.view',
        ]),
        _role('prod-operator', 'Production Operator', 'Execute production orders', [
            'work_orders.view', 'work_orders.start', 'work_orders.pause', 'work_orders.complete',
            'manufacturing.view', 'manufacturing.record_output', 'manufacturing.record_waste',
        ]),
        _role('quality-control', 'Quality Control', 'Manage quality inspections',
              ['work_orders.view', 'quality.*'], is_system=False),
    ],
    'invoice': [
        _role('inv-admin', 'Invoice Admin', 'Full access to invoicing', ['invoices.*', 'recurring.*', 'templates.*']),
        _role('inv-manager', 'Invoice Manager', 'Create and manage invoices', [
            'invoices.view', 'invoices.create', 'invoices.edit', 'invoices.send', 'invoices.record_payment',
            'recurring.view', 'recurring.create', 'recurring.edit', 'templates.view',
        ]),
        _role('inv-clerk', 'Invoice Clerk', 'Create invoices', [
            'invoices.view', 'invoices.create', 'invoices.edit', 'invoices.send', 'templates.view',
        ]),
        _role('inv-viewer', 'Invoice Viewer', 'View invoices only', ['invoices.view', 'recurring.view', 'templates.view']),
    ],
    'bank': [
        _role('bank-admin', 'Bank Admin', 'Full access to banking',
              ['accounts.*', 'transactions.*', 'reconciliation.*', 'transfers.*']),
        _role('bank-manager', 'Bank Manager', 'Manage transactions', [
            'accounts.view', 'accounts.view_balance', 'transactions.*', 'reconciliation.view',
            'reconciliation.perform', 'transfers.*',
        ]),
        _role('bank-clerk', 'Bank Clerk', 'Record transactions', [
            'accounts.view', 'accounts.view_balance', 'transactions.view', 'transactions.create',
            'transactions.categorize', 'transfers.view',
        ]),
        _role('bank-viewer', 'Bank Viewer', 'View transactions only', [
            'accounts.view', 'accounts.view_balance', 'transactions.view', 'reconciliation.view', 'transfers.view',
        ]),
    ],
    'fixed-assets': [
        _role('fa-admin', 'Asset Admin', 'Full access to fixed assets',
              ['register.*', 'categories.*', 'depreciation.*', 'disposal.*']),
        _role('fa-manager', 'Asset Manager', 'Manage assets and depreciation', [
            'register.view', 'register.create', 'register.edit', 'register.transfer', 'register.assign',
            'categories.view', 'depreciation.view', 'depreciation.calculate', 'disposal.view', 'disposal.approve',
        ]),
        _role('fa-custodian', 'Asset Custodian', 'Track and maintain assets', [
            'register.view', 'register.edit', 'register.transfer', 'categories.view', 'disposal.view', 'disposal.request',
        ]),
        _role('fa-viewer', 'Asset Viewer', 'View assets only',
              ['register.view', 'categories.view', 'depreciation.view', 'disposal.view']),
    ],
    'corporate-cards': [
        _role('cc-admin', 'Card Admin', 'Full access to corporate cards',
              ['cards.*', 'transactions.*', 'limits.*', 'reports.*']),
        _role('cc-manager', 'Card Manager', 'Manage cards and limits', [
            'cards.view', 'cards.issue', 'cards.block', 'cards.unblock', 'transactions.view', 'transactions.export',
            'transactions.categorize', 'limits.*', 'reports.*',
        ]),
        _role('cc-holder', 'Cardholder', 'Card user',
              ['cards.view_own', 'transactions.view_own', 'limits.view', 'limits.request_increase']),
        _role('cc-viewer', 'Card Viewer', 'View transactions only',
              ['cards.view', 'transactions.view', 'limits.view', 'reports.view']),
    ],
    'nrs-einvoice': [
        _role('nrs-admin', 'NRS Admin', 'Full access to NRS e-invoicing', ['invoices.*', 'compliance.*', 'certificates.*']),
        _role('nrs-manager', 'NRS Manager', 'Manage compliance submissions', [
            'invoices.view', 'invoices.create', 'invoices.submit', 'invoices.resubmit', 'compliance.view',
            'compliance.generate_reports', 'certificates.view',
        ]),
        _role('nrs-clerk', 'NRS Clerk', 'Create and submit invoices',
              ['invoices.view', 'invoices.create', 'invoices.submit', 'compliance.view']),
        _role('nrs-viewer', 'NRS Viewer', 'View submissions only', ['invoices.view', 'compliance.view', 'certificates.view']),
    ],
}
